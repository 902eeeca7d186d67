"""
Validation rule sets for the accounts endpoints.
"""

from app.shared.validation.rules import is_email, length, matches, required

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

USER_RULES = (
    is_email("email", "Invalid email format"),
    length(
        "password",
        f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
        min_length=PASSWORD_MIN_LENGTH,
    ),
    matches(
        "password",
        r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)",
        "Password must contain at least one uppercase letter, "
        "one lowercase letter, and one number",
    ),
    length(
        "name",
        f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters long",
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
    ),
    matches("name", r"^[a-zA-Z\s]+$", "Name can only contain letters and spaces"),
)

LOGIN_RULES = (
    is_email("email", "Invalid email format"),
    required("password", "Password is required"),
)

TRIMMED_FIELDS = ("name", "email")
