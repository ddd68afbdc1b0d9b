"""Error kinds raised by the vehicles service."""


class VehiclesError(Exception):
    """Base exception for all vehicles_app errors."""


class CarNotFound(VehiclesError):
    """The referenced car id does not exist in the store."""

    def __init__(self, car_id: int) -> None:
        self.car_id = car_id
        super().__init__(f"Car with ID {car_id} not found")


class ProviderUnavailable(VehiclesError):
    """A price or address lookup failed or timed out."""

    def __init__(self, provider: str, detail: str = "") -> None:
        self.provider = provider
        self.detail = detail
        message = f"{provider} provider unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
