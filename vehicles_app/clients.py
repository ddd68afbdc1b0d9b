import logging

import httpx

from .exceptions import ProviderUnavailable
from .models import Location


logger = logging.getLogger(__name__)


class PriceClient:
    """
    Client for the pricing service.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def get_price(self, vehicle_id: int) -> str:
        """
        Fetch the current price of a vehicle.

        Args:
            vehicle_id (int): Identifier of the vehicle in the store.

        Returns:
            str: The price formatted as "<currency> <amount>", e.g. "USD 21356.10".
        """
        price_url = f"{self.base_url}/services/price"
        try:
            response = await self.http_client.get(
                price_url, params={"vehicleId": vehicle_id}
            )
            response.raise_for_status()
            data = response.json()
            price = f"{data['currency']} {data['price']}"

            logger.debug(f"Fetched price for vehicle {vehicle_id}")
            return price
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.exception(f"Error occurred during price lookup for vehicle {vehicle_id}")
            raise ProviderUnavailable("pricing", str(e)) from e


class MapsClient:
    """
    Client for the maps (reverse geocoding) service.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def get_address(self, location: Location) -> Location:
        """
        Resolve the address of a coordinate pair.

        Args:
            location (Location): Location whose lat/lon are looked up.

        Returns:
            Location: A copy of the location with address, city, state and zip set.
        """
        maps_url = f"{self.base_url}/maps"
        try:
            response = await self.http_client.get(
                maps_url, params={"lat": location.lat, "lon": location.lon}
            )
            response.raise_for_status()
            data = response.json()
            resolved = location.model_copy(
                update={
                    "address": data["address"],
                    "city": data["city"],
                    "state": data["state"],
                    "zip": data["zip"],
                }
            )

            logger.debug(f"Resolved address for ({location.lat}, {location.lon})")
            return resolved
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.exception(
                f"Error occurred during address lookup for ({location.lat}, {location.lon})"
            )
            raise ProviderUnavailable("maps", str(e)) from e
