"""Field validation for request bodies.

Each validator collects every violated rule instead of stopping at the
first one, and returns messages keyed by field name. An empty mapping
means the body is valid.
"""
import math
from typing import Optional

from response_examples.schemas.error_demo import ValidationRequest
from response_examples.schemas.product import ProductRequest

ValidationErrors = dict[str, list[str]]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_product(request: ProductRequest) -> ValidationErrors:
    """Check the fields of a product create or update request."""
    errors: ValidationErrors = {}

    if _is_blank(request.name):
        errors["Name"] = ["The Name field is required."]

    if request.price < 0:
        errors["Price"] = ["The Price field must be greater than or equal to 0."]
    elif not math.isfinite(float(request.price)):
        errors["Price"] = ["The Price field is outside the supported range."]

    if request.stock_quantity < 0:
        errors["StockQuantity"] = ["The StockQuantity field must be greater than or equal to 0."]

    return errors


def validate_contact(request: Optional[ValidationRequest]) -> ValidationErrors:
    """Check the name/email/age body of the validation demo."""
    if request is None:
        return {"request": ["Request body is required."]}

    errors: ValidationErrors = {}

    if _is_blank(request.name):
        errors["Name"] = ["The Name field is required."]
    elif len(request.name) < 3:
        errors["Name"] = ["The Name field must be at least 3 characters long."]

    if _is_blank(request.email):
        errors["Email"] = ["The Email field is required."]
    elif "@" not in request.email:
        errors["Email"] = ["The Email field must be a valid email address."]

    if request.age < 0 or request.age > 120:
        errors["Age"] = ["The Age field must be between 0 and 120."]

    return errors
