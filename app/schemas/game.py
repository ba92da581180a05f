from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Keeps price_per_day * days_rented and the stock counter inside a 32-bit integer
MAX_PRICE_PER_DAY = 1_000_000
MAX_STOCK_TOTAL = 1_000_000


class Game(BaseModel):
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    image: str
    stock_total: int
    category_id: int
    price_per_day: int
    category_name: str | None = None


class GameCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    image: str = Field(..., min_length=1)
    stock_total: int = Field(..., ge=1, le=MAX_STOCK_TOTAL, description="Units owned, at least 1")
    category_id: int
    price_per_day: int = Field(
        ..., ge=1, le=MAX_PRICE_PER_DAY, description="Price per day in minor currency units"
    )
