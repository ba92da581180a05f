import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Customer(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    phone: str
    cpf: str
    birthday: date


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., pattern=r"^[0-9]{10,11}$", description="10 or 11 digits")
    cpf: str = Field(..., pattern=r"^[0-9]{11}$", description="Exactly 11 digits")
    birthday: date

    @field_validator("birthday", mode="before")
    @classmethod
    def validate_birthday_format(cls, v):
        """Only accept a YYYY-MM-DD string (or a date built in code), never a timestamp."""
        if isinstance(v, date):
            return v
        if not isinstance(v, str) or not _ISO_DATE.match(v):
            raise ValueError('Date format is invalid, valid format should be "YYYY-MM-DD"')
        return v


class CustomerUpdate(CustomerCreate):
    pass
