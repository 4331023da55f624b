"""
Property search filter criteria.

Every field is optional; ``None`` means the filter is not applied.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class PropertySearchCriteria(BaseModel):
    """Sparse set of filters for the property search page.

    Prices are in whole currency units (dollars), not cents. Minimum and
    maximum price are not checked against each other; an inverted range
    simply matches nothing.
    """

    city: str | None = Field(default=None, description="Case-insensitive substring of the city")
    minimum_price_per_night: int | float | None = Field(
        default=None, description="Lower price bound in dollars (exclusive)"
    )
    maximum_price_per_night: int | float | None = Field(
        default=None, description="Upper price bound in dollars (exclusive)"
    )
    owner_id: int | None = Field(default=None, description="Only properties owned by this user")
    minimum_rating: int | float | None = Field(
        default=None, description="Average review rating must exceed this value"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:  # noqa: ANN401
        # Search forms submit untouched inputs as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value
