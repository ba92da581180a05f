from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_DAYS_RENTED = 365


class RentalCustomer(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class RentalGame(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class Rental(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    customer_id: int
    game_id: int
    rent_date: date
    days_rented: int
    return_date: date | None = None
    original_price: int
    delay_fee: int | None = None
    customer: RentalCustomer | None = None
    game: RentalGame | None = None


class RentalCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Strict: JSON booleans, floats and numeric strings are rejected
    customer_id: int = Field(..., strict=True)
    game_id: int = Field(..., strict=True)
    days_rented: int = Field(
        ...,
        gt=0,
        le=MAX_DAYS_RENTED,
        strict=True,
        description=f"Number of days, from 1 to {MAX_DAYS_RENTED}",
    )
