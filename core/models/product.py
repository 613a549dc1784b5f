# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the contract for product operations:
# - ProductInput: Validation schema for submitted product form fields
# - Product: A product row as returned by the data store
#
# ProductInput carries the storefront's human-readable rule messages; they
# are surfaced verbatim to the admin form when validation fails.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Checkbox values that mean "not featured"
FALSE_VALUES = {"", "false", "off", "0", "no"}

MIN_TEXT_LENGTH = 4
MAX_TEXT_LENGTH = 100
MIN_DESCRIPTION_WORDS = 10
MAX_DESCRIPTION_WORDS = 1000


def count_words(text: str) -> int:
    """Count words the way the product form does: split on single spaces."""
    return len(text.split(" "))


def _check_length(value: str, label: str) -> str:
    if len(value) < MIN_TEXT_LENGTH:
        raise ValueError(f"{label} must be at least {MIN_TEXT_LENGTH} characters")
    if len(value) > MAX_TEXT_LENGTH:
        raise ValueError(f"{label} must be less than {MAX_TEXT_LENGTH} characters")
    return value


class ProductInput(BaseModel):
    """
    Validation schema for product form submissions.

    Used for both creating and updating products. Values arrive as raw form
    strings; `featured` and `price` are coerced.

    Example:
        {
            "name": "Walnut Chair",
            "company": "Acme Furniture",
            "price": "120",
            "featured": "on",
            "description": "A sturdy chair ..."
        }
    """

    name: str = Field(..., description="Product display name")
    company: str = Field(..., description="Company that makes the product")
    featured: bool = Field(default=False, description="Shown on the home page")
    price: int = Field(..., description="Price in whole currency units")
    description: str = Field(..., description="Product description (10-1000 words)")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _check_length(value, "name")

    @field_validator("company")
    @classmethod
    def check_company(cls, value: str) -> str:
        return _check_length(value, "company name")

    @field_validator("featured", mode="before")
    @classmethod
    def coerce_featured(cls, value: Any) -> bool:
        """Checkbox semantics: absent or a "false-like" string means False."""
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() not in FALSE_VALUES

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, value: Any) -> int:
        """Accept whole numbers, including forms like "12.0" or 12.0."""
        if isinstance(value, bool):
            raise ValueError("price must be a whole number")
        if isinstance(value, int):
            number = value
        else:
            text = str(value).strip()
            try:
                number = int(text)
            except ValueError:
                try:
                    parsed = float(text)
                except ValueError:
                    raise ValueError("price must be a whole number")
                if not parsed.is_integer():
                    raise ValueError("price must be a whole number")
                number = int(parsed)
        if number < 0:
            raise ValueError("price must be a positive number")
        return number

    @field_validator("description")
    @classmethod
    def check_description(cls, value: str) -> str:
        words = count_words(value)
        if words < MIN_DESCRIPTION_WORDS or words > MAX_DESCRIPTION_WORDS:
            raise ValueError(
                f"description must be between {MIN_DESCRIPTION_WORDS} and {MAX_DESCRIPTION_WORDS} words"
            )
        return value


class Product(BaseModel):
    """
    A product row from the `products` table.

    Returned by every product read handler.
    """

    id: str
    name: str
    company: str
    description: str
    featured: bool = False
    image: str
    price: int = Field(..., ge=0)
    owner_id: str
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("id", "owner_id", mode="before")
    @classmethod
    def stringify_ids(cls, value: Any) -> str:
        return str(value)
