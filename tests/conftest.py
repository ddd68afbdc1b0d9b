from unittest.mock import AsyncMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vehicles_app.db import Base
from vehicles_app.models import Car, Details, Location, Manufacturer
from vehicles_app.service import CarService
from vehicles_app.store import CarStore


@pytest.fixture
def db_session():
    # A fresh in-memory database for each test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store(db_session):
    return CarStore(db_session)


@pytest.fixture
def mock_price_client():
    # Price derived from the id so that mixed-up records are detectable
    client = AsyncMock()
    client.get_price.side_effect = lambda car_id: f"USD {car_id}000.00"
    return client


@pytest.fixture
def mock_maps_client():
    client = AsyncMock()
    client.get_address.side_effect = lambda location: location.model_copy(
        update={"address": f"{location.lat},{location.lon} Main St"}
    )
    return client


@pytest.fixture
def service(store, mock_price_client, mock_maps_client):
    return CarService(store, mock_price_client, mock_maps_client)


@pytest.fixture
def new_car():
    return Car(
        details=Details(
            manufacturer=Manufacturer(code=101, name="Chevrolet"),
            model="Impala",
            body="sedan",
            mileage=32280,
            external_color="white",
            production_year=2018,
            model_year=2018,
            number_of_doors=4,
            fuel_type="Gasoline",
            engine="3.6L V6",
        ),
        location=Location(lat=40.730610, lon=-73.935242),
    )
