from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, require_manager
from ..services.client_service import ClientService

router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Client])
def list_clients(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    return ClientService.list_clients(db)


@router.post("", response_model=schemas.ClientCreated, status_code=201)
def create_client(
    client: schemas.ClientCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    """Create a client account and record"""
    return ClientService.create_client(db, client)


@router.get("/{client_id}", response_model=schemas.Client)
def get_client(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    return ClientService.get_client(db, client_id)


@router.put("/{client_id}", response_model=schemas.Client)
def update_client(
    client_id: int,
    client_update: schemas.ClientUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    client = ClientService.get_client(db, client_id)
    return ClientService.update_client(db, client, client_update)


@router.delete("/{client_id}", response_model=schemas.MessageResponse)
def delete_client(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    client = ClientService.get_client(db, client_id)
    ClientService.delete_client(db, client)
    return {"message": "Client deleted successfully"}
