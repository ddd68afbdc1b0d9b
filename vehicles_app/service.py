import logging
from typing import Awaitable, Callable

from .clients import MapsClient, PriceClient
from .exceptions import CarNotFound
from .models import Car, Location
from .store import CarStore


logger = logging.getLogger(__name__)

PriceLookup = Callable[[int], Awaitable[str]]
AddressLookup = Callable[[Location], Awaitable[Location]]


async def enrich(
    car: Car, price_lookup: PriceLookup, address_lookup: AddressLookup
) -> Car:
    """
    Attach the current price and address to a stored car.

    Args:
        car (Car): A car as read from the store.
        price_lookup: Coroutine function returning the price for a car id.
        address_lookup: Coroutine function returning the location with its address resolved.

    Returns:
        Car: A copy of the car with price and location address set. The input is not modified.

    Raises:
        ProviderUnavailable: If either lookup fails. No partially enriched car is returned.
    """
    price = await price_lookup(car.id)
    location = await address_lookup(car.location)
    return car.model_copy(update={"price": price, "location": location})


class CarService:
    """
    Create, read, update and delete cars, gathering price and location data on reads.
    """

    def __init__(
        self, store: CarStore, price_client: PriceClient, maps_client: MapsClient
    ):
        self.store = store
        self.price_client = price_client
        self.maps_client = maps_client

    async def _enrich(self, car: Car) -> Car:
        return await enrich(car, self.price_client.get_price, self.maps_client.get_address)

    async def list(self) -> list[Car]:
        """
        Gather every stored car with its current price and address.

        Returns:
            list[Car]: One enriched car per stored record, in store order.
        """
        cars = []
        for car in self.store.find_all():
            cars.append(await self._enrich(car))
        logger.debug(f"Listed {len(cars)} cars")
        return cars

    async def find_by_id(self, car_id: int) -> Car:
        """
        Get a car by id, including its current price and address.

        Raises:
            CarNotFound: If no car with this id exists.
        """
        car = self.store.find_by_id(car_id)
        if car is None:
            logger.warning(f"Car {car_id} not found")
            raise CarNotFound(car_id)
        return await self._enrich(car)

    async def save(self, car: Car) -> Car:
        """
        Create a car when it has no id, otherwise update the existing one.

        An update only replaces details and location coordinates; every other
        stored field is kept. The returned car is what was stored, without
        price or address.

        Raises:
            CarNotFound: If the car carries an id that does not exist.
        """
        if car.id is None:
            created = self.store.save(
                car.model_copy(update={"location": car.location.coordinates()})
            )
            logger.info(f"Car with ID {created.id} was saved successfully")
            return created

        existing = self.store.find_by_id(car.id)
        if existing is None:
            logger.warning(f"Car {car.id} not found for update")
            raise CarNotFound(car.id)

        merged = existing.model_copy(
            update={"details": car.details, "location": car.location.coordinates()}
        )
        updated = self.store.save(merged)
        logger.info(f"Car with ID {updated.id} was updated successfully")
        return updated

    async def delete(self, car_id: int) -> None:
        """
        Delete a car by id.

        Raises:
            CarNotFound: If no car with this id exists. The store is left untouched.
        """
        if not self.store.exists_by_id(car_id):
            logger.warning(f"Deletion of car with ID {car_id} was unsuccessful")
            raise CarNotFound(car_id)

        self.store.delete_by_id(car_id)
        logger.info(f"Car with ID {car_id} was deleted successfully")
