"""
Tests for the field validation rules and the concurrent rule runner.
"""

import asyncio

import pytest

from app.domain.errors import FailureKind, Violation
from app.interfaces.accounts.rules import LOGIN_RULES, USER_RULES
from app.interfaces.catalog.rules import PRODUCT_RULES
from app.shared.validation.rules import (
    Rule,
    in_range,
    is_email,
    length,
    matches,
    optional,
    required,
)
from app.shared.validation.runner import run_rules, validate_payload

NAME_RULE = length(
    "name",
    "Name must be between 2 and 50 characters long",
    min_length=2,
    max_length=50,
)


class TestRules:
    """Unit tests for the individual rule families."""

    @pytest.mark.asyncio
    async def test_name_length_scenario(self) -> None:
        violations = await run_rules([NAME_RULE], {"name": "A"})
        assert violations == (
            Violation("name", "Name must be between 2 and 50 characters long"),
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("value", "ok"),
        [("ab", True), ("a" * 50, True), ("a" * 51, False), ("a", False), (42, False)],
    )
    async def test_length_bounds(self, value: object, ok: bool) -> None:
        assert (await NAME_RULE.check({"name": value}) is None) is ok

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("value", "ok"),
        [
            ("juan@example.com", True),
            (" juan@example.com ", True),
            ("juan@example", False),
            ("juan example.com", False),
            (None, False),
        ],
    )
    async def test_email(self, value: object, ok: bool) -> None:
        rule = is_email("email")
        assert (await rule.check({"email": value}) is None) is ok

    @pytest.mark.asyncio
    async def test_matches_uses_search(self) -> None:
        rule = matches("password", r"(?=.*\d)", "needs a digit")
        assert await rule.check({"password": "abc1def"}) is None
        assert await rule.check({"password": "abcdef"}) == Violation("password", "needs a digit")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("value", "ok"),
        [(0, True), (19.99, True), ("5.5", True), (-1, False), ("abc", False),
         (True, False), ("nan", False), ("inf", False), (101, False),
         (10**400, False), ("1e400", False)],
    )
    async def test_in_range(self, value: object, ok: bool) -> None:
        rule = in_range("price", "bad price", minimum=0, maximum=100)
        assert (await rule.check({"price": value}) is None) is ok

    @pytest.mark.asyncio
    async def test_required_rejects_blank(self) -> None:
        rule = required("password", "Password is required")
        assert await rule.check({"password": "  "}) is not None
        assert await rule.check({}) is not None
        assert await rule.check({"password": "x"}) is None

    @pytest.mark.asyncio
    async def test_optional_skips_absent_field(self) -> None:
        rule = optional(length("description", "too long", max_length=5))
        assert await rule.check({}) is None
        assert await rule.check({"description": None}) is None
        assert await rule.check({"description": "way too long"}) is not None

    @pytest.mark.asyncio
    async def test_missing_field_fails_non_optional_rule(self) -> None:
        assert await NAME_RULE.check({}) == Violation(
            "name", "Name must be between 2 and 50 characters long"
        )

    @pytest.mark.asyncio
    async def test_async_predicate(self) -> None:
        async def not_taken(value: object) -> bool:
            await asyncio.sleep(0)
            return value != "taken"

        rule = Rule("username", "Username already taken", not_taken)
        assert await rule.check({"username": "free"}) is None
        assert await rule.check({"username": "taken"}) is not None


class TestRunRules:
    """Tests for the fan-out/join runner."""

    @pytest.mark.asyncio
    async def test_no_failures_gives_empty_list(self) -> None:
        payload = {"name": "Juan Perez", "email": "juan@example.com", "password": "Secure123"}
        assert await run_rules(USER_RULES, payload) == ()
        assert await validate_payload(USER_RULES, payload) is None

    @pytest.mark.asyncio
    async def test_every_failure_reported_in_declaration_order(self) -> None:
        payload = {"name": "A1", "email": "nope", "password": "short"}
        violations = await run_rules(USER_RULES, payload)
        assert [v.message for v in violations] == [
            "Invalid email format",
            "Password must be at least 8 characters long",
            "Password must contain at least one uppercase letter, "
            "one lowercase letter, and one number",
            "Name can only contain letters and spaces",
        ]

    @pytest.mark.asyncio
    async def test_order_kept_regardless_of_completion_order(self) -> None:
        def slow(delay: float):
            async def predicate(value: object) -> bool:
                await asyncio.sleep(delay)
                return False

            return predicate

        rules = [
            Rule("a", "first", slow(0.03)),
            Rule("b", "second", slow(0.0)),
            Rule("c", "third", slow(0.01)),
        ]
        violations = await run_rules(rules, {"a": 1, "b": 2, "c": 3})
        assert [v.message for v in violations] == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_rules_run_concurrently(self) -> None:
        running = 0
        peak = 0

        async def predicate(value: object) -> bool:
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return True

        rules = [Rule(name, "m", predicate) for name in ("a", "b", "c")]
        await run_rules(rules, {"a": 1, "b": 1, "c": 1})
        assert peak == 3

    @pytest.mark.asyncio
    async def test_validate_payload_builds_validation_failure(self) -> None:
        failure = await validate_payload(LOGIN_RULES, {"email": "bad"})
        assert failure is not None
        assert failure.kind is FailureKind.VALIDATION
        assert [v.field for v in failure.violations] == ["email", "password"]

    @pytest.mark.asyncio
    async def test_product_rules_allow_missing_description(self) -> None:
        payload = {"name": "Lamp", "price": "12.50", "category": "Home"}
        assert await run_rules(PRODUCT_RULES, payload) == ()
