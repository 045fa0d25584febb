"""Customer Schemas — request validation for the Paystack customer passthrough."""

from pydantic import BaseModel, Field, field_validator


class CustomerCreate(BaseModel):
    """Customer creation — email required, profile fields optional."""
    email: str = Field(max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=32)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v
