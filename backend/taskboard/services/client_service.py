import logging
from typing import List

from sqlalchemy.orm import Session

from .. import models, schemas
from ..enums import UserRole
from ..exceptions import NotFoundError
from ..schemas import ClientCreate, ClientUpdate, ClientCreated, UserCreate
from .auth_service import AuthService

logger = logging.getLogger(__name__)

ACCOUNT_FIELDS = ("name", "email")


class ClientService:
    """Service for client records; every client is backed by a ``client`` user account."""

    @staticmethod
    def list_clients(db: Session) -> List[models.Client]:
        return (
            db.query(models.Client)
            .order_by(models.Client.created_at.desc(), models.Client.id.desc())
            .all()
        )

    @staticmethod
    def get_client(db: Session, client_id: int) -> models.Client:
        """
        Raises:
            NotFoundError: If the client does not exist
        """
        client = db.query(models.Client).filter(models.Client.id == client_id).first()
        if client is None:
            raise NotFoundError("Client not found")
        return client

    @staticmethod
    def create_client(db: Session, data: ClientCreate) -> ClientCreated:
        """
        Create the client account and its record.

        Raises:
            ConflictError: If the email is already registered
        """
        password = AuthService.generate_password()
        user = AuthService.create_account(
            db, UserCreate(name=data.name, email=data.email, password=password, role=UserRole.CLIENT)
        )

        client = models.Client(user_id=user.id, **data.model_dump(mode="json", exclude=set(ACCOUNT_FIELDS)))
        db.add(client)
        db.commit()
        db.refresh(client)

        logger.info(f"Client {client.id} created for user {user.id}")
        return ClientCreated(client=schemas.Client.model_validate(client), password=password)

    @staticmethod
    def update_client(db: Session, client: models.Client, data: ClientUpdate) -> models.Client:
        fields = data.model_dump(mode="json", exclude_unset=True)
        account = {key: fields.pop(key) for key in ACCOUNT_FIELDS if key in fields}
        AuthService.update_account(db, client.user, **account)

        for key, value in fields.items():
            setattr(client, key, value)

        db.commit()
        db.refresh(client)
        return client

    @staticmethod
    def delete_client(db: Session, client: models.Client) -> None:
        """Delete the client together with the user account; their projects lose the client link."""
        client_id, user_id = client.id, client.user_id
        db.delete(client.user)
        db.commit()
        logger.info(f"Client {client_id} and user {user_id} deleted")
