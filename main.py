import logging

import httpx
from fastapi import FastAPI, Depends, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.responses import HTMLResponse

import vehicles_app.models as model
from vehicles_app.clients import MapsClient, PriceClient
from vehicles_app.config import settings
from vehicles_app.db import Base, engine, get_db
from vehicles_app.exceptions import CarNotFound, ProviderUnavailable
from vehicles_app.service import CarService
from vehicles_app.store import CarStore


logging.basicConfig(level=settings.log_level)
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Vehicles API")
http_client = httpx.AsyncClient(timeout=settings.provider_timeout)
logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)


def get_car_service(db: Session = Depends(get_db)) -> CarService:
    """
    Dependency function to build a car service bound to the request's db session.
    """
    return CarService(
        CarStore(db),
        PriceClient(http_client, settings.pricing_url),
        MapsClient(http_client, settings.maps_url),
    )


@app.exception_handler(CarNotFound)
async def car_not_found_handler(request: Request, exc: CarNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ProviderUnavailable)
async def provider_unavailable_handler(request: Request, exc: ProviderUnavailable):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.get("/cars", response_model=list[model.Car])
async def list_cars(service: CarService = Depends(get_car_service)):
    """
    Endpoint to list every car with its current price and address.

    Args:
        service (CarService): The car service, injected via dependency injection.

    Returns:
        list[model.Car]: All stored cars, enriched.
    """
    logger.info("Received car list request")
    return await service.list()


@app.get("/cars/{car_id}", response_model=model.Car)
async def get_car(car_id: int, service: CarService = Depends(get_car_service)):
    """
    Endpoint to get a single car with its current price and address.

    Args:
        car_id (int): The id of the requested car.
        service (CarService): The car service, injected via dependency injection.

    Returns:
        model.Car: The enriched car. Responds 404 when the id is unknown.
    """
    logger.info(f"Received request for car {car_id}")
    return await service.find_by_id(car_id)


@app.post("/cars", response_model=model.Car, status_code=201)
async def create_car(car: model.Car, service: CarService = Depends(get_car_service)):
    """
    Endpoint to add a new car to the system.

    Args:
        car (model.Car): The new car. Any id in the payload is ignored.
        service (CarService): The car service, injected via dependency injection.

    Returns:
        model.Car: The stored car with its assigned id.
    """
    logger.info("Received car creation request")
    return await service.save(car.model_copy(update={"id": None}))


@app.put("/cars/{car_id}", response_model=model.Car)
async def update_car(
    car_id: int, car: model.Car, service: CarService = Depends(get_car_service)
):
    """
    Endpoint to update the details and location of an existing car.

    Args:
        car_id (int): The id of the car to update.
        car (model.Car): The updated information about the car.
        service (CarService): The car service, injected via dependency injection.

    Returns:
        model.Car: The stored car after the update.
    """
    logger.info(f"Received update request for car {car_id}")
    return await service.save(car.model_copy(update={"id": car_id}))


@app.delete("/cars/{car_id}", response_model=model.CarDeleteResponse)
async def delete_car(car_id: int, service: CarService = Depends(get_car_service)):
    """
    Endpoint to remove a car from the system.

    Args:
        car_id (int): The id of the car to remove.
        service (CarService): The car service, injected via dependency injection.

    Returns:
        model.CarDeleteResponse: The id requested for deletion and the success status.
    """
    logger.info(f"Received deletion request for car {car_id}")
    await service.delete(car_id)
    return model.CarDeleteResponse(car_id=car_id, delete_success=True)


@app.get("/", response_class=HTMLResponse)
async def root():
    """
    Default endpoint that redirects the user to the Swagger UI.

    Returns:
        HTMLResponse: An HTMLResponse object that represents the Swagger UI page.
    """
    return get_swagger_ui_html(openapi_url="/openapi.json", title="API Docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
