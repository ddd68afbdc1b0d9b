import logging

from sqlalchemy.orm import Session

from .db import CarRecord
from .exceptions import CarNotFound
from .models import Car, Condition, Details, Location


logger = logging.getLogger(__name__)


def to_model(record: CarRecord) -> Car:
    """
    Convert a stored row into a Car. Transient fields are left empty.
    """
    return Car(
        id=record.id,
        condition=Condition(record.condition),
        details=Details.model_validate(record.details),
        location=Location(lat=record.lat, lon=record.lon),
        created_at=record.created_at,
        modified_at=record.modified_at,
    )


class CarStore:
    """
    Durable keyed storage for cars, backed by a SQLAlchemy session.

    Each call commits on its own; the service never spans a transaction
    across several store calls.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Car]:
        records = self.db.query(CarRecord).order_by(CarRecord.id).all()
        return [to_model(record) for record in records]

    def find_by_id(self, car_id: int) -> Car | None:
        record = self.db.get(CarRecord, car_id)
        if record is None:
            return None
        return to_model(record)

    def exists_by_id(self, car_id: int) -> bool:
        return self.db.query(CarRecord.id).filter(CarRecord.id == car_id).first() is not None

    def save(self, car: Car) -> Car:
        """
        Insert the car when it has no id, otherwise overwrite its durable fields.

        Price and address are never written. created_at and modified_at are
        managed here and ignored on the input.

        Raises:
            CarNotFound: If the car carries an id that is not in the store.
        """
        if car.id is None:
            record = CarRecord()
            self.db.add(record)
        else:
            record = self.db.get(CarRecord, car.id)
            if record is None:
                raise CarNotFound(car.id)

        record.condition = car.condition.value
        record.details = car.details.model_dump(mode="json")
        record.lat = car.location.lat
        record.lon = car.location.lon

        self.db.commit()
        self.db.refresh(record)
        logger.debug(f"Stored car record {record.id}")
        return to_model(record)

    def delete_by_id(self, car_id: int) -> None:
        self.db.query(CarRecord).filter(CarRecord.id == car_id).delete()
        self.db.commit()
