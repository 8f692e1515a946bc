from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, status
from rental_api.dependencies import get_vehicle_repository
from rental_api.errors import AppError, ServerError
from rental_api.logger import get_logger
from rental_api.repositories import VehicleRepository
from rental_api.schemas.vehicle import VehicleOut

router = APIRouter()
logger = get_logger("routes.vehicles")


@router.get("/vehicles", response_model=List[VehicleOut])
async def get_vehicles(repo: VehicleRepository = Depends(get_vehicle_repository)):
    try:
        return await repo.list()
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to fetch vehicles")
        raise ServerError("Error fetching vehicles", str(e)) from e


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut)
async def get_vehicle(vehicle_id: str, repo: VehicleRepository = Depends(get_vehicle_repository)):
    try:
        return await repo.get(vehicle_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Failed to fetch vehicle {vehicle_id}")
        raise ServerError("Error fetching vehicle", str(e)) from e


@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    payload: Dict[str, Any] = Body(...),
    repo: VehicleRepository = Depends(get_vehicle_repository),
):
    try:
        return await repo.create(payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to create vehicle")
        raise ServerError("Error creating vehicle", str(e)) from e


@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut)
async def update_vehicle(
    vehicle_id: str,
    payload: Dict[str, Any] = Body(...),
    repo: VehicleRepository = Depends(get_vehicle_repository),
):
    try:
        return await repo.update(vehicle_id, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Failed to update vehicle {vehicle_id}")
        raise ServerError("Error updating vehicle", str(e)) from e


@router.delete("/vehicles/{vehicle_id}")
async def delete_vehicle(vehicle_id: str, repo: VehicleRepository = Depends(get_vehicle_repository)):
    try:
        return await repo.delete(vehicle_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Failed to delete vehicle {vehicle_id}")
        raise ServerError("Error deleting vehicle", str(e)) from e
