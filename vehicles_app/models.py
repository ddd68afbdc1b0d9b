from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Condition(str, Enum):
    NEW = "NEW"
    USED = "USED"


class Manufacturer(BaseModel):
    code: int
    name: str


class Details(BaseModel):
    """
    Descriptive attributes of a car. Stored verbatim, so unknown keys are kept.
    """

    model_config = ConfigDict(extra="allow", protected_namespaces=())

    manufacturer: Manufacturer
    model: str
    body: str | None = None
    number_of_doors: int | None = None
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = None
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None

    @field_validator("model")
    @classmethod
    def validate_model(cls, model):
        if not model.strip():
            raise ValueError("Model must not be blank")
        return model


class Location(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    # filled in from the maps provider on read, never persisted
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    def coordinates(self) -> "Location":
        """
        Return a copy holding only the persisted part of the location.
        """
        return Location(lat=self.lat, lon=self.lon)


class Car(BaseModel):
    id: int | None = None
    condition: Condition = Condition.USED
    details: Details
    location: Location

    # filled in from the pricing provider on read, never persisted
    price: str | None = None

    created_at: datetime | None = None
    modified_at: datetime | None = None


class CarDeleteResponse(BaseModel):
    car_id: int
    delete_success: bool
