from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, status
from rental_api.dependencies import get_reservation_repository
from rental_api.errors import AppError, ServerError
from rental_api.logger import get_logger
from rental_api.repositories import ReservationRepository
from rental_api.schemas.reservation import ReservationOut

router = APIRouter()
logger = get_logger("routes.reservations")

# No route here looks up the vehicle behind a reservation's vehicleId.


@router.get("/reservations", response_model=List[ReservationOut])
async def get_reservations(repo: ReservationRepository = Depends(get_reservation_repository)):
    try:
        return await repo.list()
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to fetch reservations")
        raise ServerError("Error fetching reservations", str(e)) from e


@router.get("/reservations/{reservation_id}", response_model=ReservationOut)
async def get_reservation(reservation_id: str, repo: ReservationRepository = Depends(get_reservation_repository)):
    try:
        return await repo.get(reservation_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Failed to fetch reservation {reservation_id}")
        raise ServerError("Error fetching reservation", str(e)) from e


@router.post("/reservations", response_model=ReservationOut, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    payload: Dict[str, Any] = Body(...),
    repo: ReservationRepository = Depends(get_reservation_repository),
):
    try:
        return await repo.create(payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to create reservation")
        raise ServerError("Error creating reservation", str(e)) from e


@router.put("/reservations/{reservation_id}", response_model=ReservationOut)
async def update_reservation(
    reservation_id: str,
    payload: Dict[str, Any] = Body(...),
    repo: ReservationRepository = Depends(get_reservation_repository),
):
    try:
        return await repo.update(reservation_id, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Failed to update reservation {reservation_id}")
        raise ServerError("Error updating reservation", str(e)) from e


@router.delete("/reservations/{reservation_id}")
async def delete_reservation(reservation_id: str, repo: ReservationRepository = Depends(get_reservation_repository)):
    try:
        return await repo.delete(reservation_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception(f"Failed to delete reservation {reservation_id}")
        raise ServerError("Error deleting reservation", str(e)) from e
