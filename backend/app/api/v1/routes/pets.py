"""Module: pets."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.api.v1.routes.deps import get_pet_service
from app.schemas.pet import InteractionRead, PetCreatePayload, PetRead
from app.services.errors import PetNotFoundError, PetNotHungryError
from app.services.pet_service import PetService

router = APIRouter()


# -------------------------
# Helpers
# -------------------------
def _pet_or_404(service: PetService, pet_id: int):
    try:
        return service.get_pet(pet_id)
    except PetNotFoundError:
        raise HTTPException(status_code=404, detail="Pet not found")


def _to_read(service: PetService, pet) -> PetRead:
    return PetRead.from_pet(pet, is_dead=service.is_dead(pet))


# -------------------------
# Endpoints
# -------------------------

@router.get("", summary="List pets", response_model=list[PetRead])
def list_pets(
    input: str | None = None,
    service: PetService = Depends(get_pet_service),
):
    # input=alive drops dead pets; anything else lists every pet by id.
    return [_to_read(service, pet) for pet in service.list_pets(input)]


@router.get("/{pet_id}", summary="Get pet", response_model=PetRead)
def get_pet(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
):
    return _to_read(service, _pet_or_404(service, pet_id))


@router.post("", summary="Create pet", response_model=PetRead, status_code=status.HTTP_201_CREATED)
def create_pet(
    payload: PetCreatePayload,
    request: Request,
    response: Response,
    service: PetService = Depends(get_pet_service),
):
    pet = service.create_pet(payload.name)
    response.headers["Location"] = str(request.url_for("get_pet", pet_id=pet.id))
    return _to_read(service, pet)


@router.delete("/{pet_id}", summary="Delete pet", response_model=PetRead)
def delete_pet(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
):
    try:
        pet = service.delete_pet(pet_id)
    except PetNotFoundError:
        raise HTTPException(status_code=404, detail="Pet not found")
    return _to_read(service, pet)


@router.post("/{pet_id}/playtimes", summary="Play with a pet", response_model=InteractionRead)
def create_playtime(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
):
    try:
        return service.record_playtime(pet_id)
    except PetNotFoundError:
        raise HTTPException(status_code=404, detail="Pet not found")


@router.post("/{pet_id}/feedings", summary="Feed a pet", response_model=InteractionRead)
def create_feeding(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
):
    try:
        return service.record_feeding(pet_id)
    except PetNotFoundError:
        raise HTTPException(status_code=404, detail="Pet not found")
    except PetNotHungryError as err:
        raise HTTPException(status_code=400, detail=str(err))


@router.post("/{pet_id}/scoldings", summary="Scold a pet", response_model=InteractionRead)
def create_scolding(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
):
    try:
        return service.record_scolding(pet_id)
    except PetNotFoundError:
        raise HTTPException(status_code=404, detail="Pet not found")
