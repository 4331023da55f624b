"""
Input models for records inserted into the LightBnB tables.

Rows read back from the database are plain dicts; these models only
describe what callers hand to the insert operations.
"""

from pydantic import BaseModel, Field


class NewUser(BaseModel):
    """A user registration, inserted into ``users``."""

    name: str = Field(description="Display name")
    email: str = Field(description="Login email, matched case-insensitively")
    password: str = Field(description="Password hash as stored by the caller")


class NewProperty(BaseModel):
    """
    A property listing, inserted into ``properties``.

    Field order is the positional column order of the insert statement.
    ``cost_per_night`` is already in cents.
    """

    title: str
    description: str = ""
    number_of_bedrooms: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    parking_spaces: int = Field(default=0, ge=0)
    cost_per_night: int = Field(description="Nightly price in cents")
    thumbnail_photo_url: str = ""
    cover_photo_url: str = ""
    street: str = ""
    country: str = ""
    city: str = ""
    province: str = ""
    post_code: str = ""
    owner_id: int = Field(description="ID of the owning user")
