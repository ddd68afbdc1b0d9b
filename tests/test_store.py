import pytest

from vehicles_app.db import CarRecord
from vehicles_app.exceptions import CarNotFound
from vehicles_app.models import Condition, Details, Location


def test_save_new_car_assigns_id(store, new_car):
    saved = store.save(new_car)

    assert saved.id is not None
    assert saved.details == new_car.details
    assert saved.created_at is not None
    assert store.exists_by_id(saved.id)


def test_save_never_persists_transient_fields(store, db_session, new_car):
    car = new_car.model_copy(
        update={
            "price": "USD 100.00",
            "location": Location(lat=1.0, lon=2.0, address="1 Nowhere Rd", city="Nowhere"),
        }
    )

    saved = store.save(car)

    record = db_session.get(CarRecord, saved.id)
    assert (record.lat, record.lon) == (1.0, 2.0)
    assert "price" not in record.details
    assert saved.price is None
    assert saved.location.address is None
    assert saved.location.city is None


def test_save_unknown_id_raises(store, new_car):
    with pytest.raises(CarNotFound) as exc_info:
        store.save(new_car.model_copy(update={"id": 42}))

    assert exc_info.value.car_id == 42
    assert store.find_all() == []


def test_save_existing_id_overwrites(store, new_car):
    saved = store.save(new_car)

    updated = store.save(
        saved.model_copy(update={"condition": Condition.NEW, "location": Location(lat=0, lon=0)})
    )

    assert updated.id == saved.id
    assert updated.condition == Condition.NEW
    assert updated.created_at == saved.created_at
    assert len(store.find_all()) == 1


def test_find_by_id_missing_returns_none(store):
    assert store.find_by_id(7) is None
    assert store.exists_by_id(7) is False


def test_find_all_in_id_order(store, new_car):
    ids = [store.save(new_car).id for _ in range(3)]

    assert [car.id for car in store.find_all()] == ids


def test_delete_by_id(store, new_car):
    saved = store.save(new_car)

    store.delete_by_id(saved.id)

    assert store.find_by_id(saved.id) is None


def test_extra_detail_keys_round_trip(store, new_car):
    details = Details.model_validate({**new_car.details.model_dump(), "trim": "LT"})

    saved = store.save(new_car.model_copy(update={"details": details}))

    assert store.find_by_id(saved.id).details.model_dump()["trim"] == "LT"
