"""
Validation rule sets for the catalog endpoints.
"""

from app.shared.validation.rules import in_range, length, optional

PRODUCT_RULES = (
    length(
        "name",
        "Product name must be between 3 and 100 characters long",
        min_length=3,
        max_length=100,
    ),
    in_range("price", "Price must be a positive number", minimum=0),
    optional(
        length(
            "description",
            "Description must be less than 500 characters long",
            max_length=500,
        )
    ),
    length(
        "category",
        "Category must be between 1 and 50 characters long",
        min_length=1,
        max_length=50,
    ),
)

TRIMMED_FIELDS = ("name", "category", "description")
