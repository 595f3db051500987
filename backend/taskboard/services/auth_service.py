import logging
from datetime import timedelta
from typing import Optional
from passlib import pwd
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from .. import models
from ..auth import (
    authenticate_user as auth_authenticate_user,
    create_user as auth_create_user,
    create_access_token as auth_create_access_token,
    ACCESS_TOKEN_EXPIRE_MINUTES
)
from ..enums import UserRole
from ..exceptions import AuthenticationError, ConflictError, ValidationError
from ..schemas import RegisterRequest, LoginRequest, AuthResponse, UserResponse, UserCreate

logger = logging.getLogger(__name__)

# Roles an anonymous visitor may pick for themselves
SELF_SERVICE_ROLES = {UserRole.DEVELOPER, UserRole.CLIENT}

GENERATED_PASSWORD_LENGTH = 12


class AuthService:
    """Service for handling authentication business logic."""
    
    @staticmethod
    def check_user_exists(db: Session, email: str) -> bool:
        """Check if a user with the given email already exists."""
        existing_user = db.query(models.User).filter(models.User.email == email).first()
        return existing_user is not None
    
    @staticmethod
    def create_access_token_for_user(user: models.User) -> str:
        """Create an access token for the given user."""
        access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        return auth_create_access_token(
            data={"sub": user.email, "user_id": user.id, "role": user.role.value},
            expires_delta=access_token_expires
        )

    @staticmethod
    def generate_password() -> str:
        """Random initial password for accounts created on someone's behalf."""
        return pwd.genword(length=GENERATED_PASSWORD_LENGTH, charset="ascii_62")

    @staticmethod
    def update_account(
        db: Session,
        user: models.User,
        name: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[UserRole] = None
    ) -> models.User:
        """
        Change identity fields of an account; the caller commits.
        
        Raises:
            ConflictError: If the new email belongs to another user
        """
        if email is not None and email != user.email:
            if AuthService.check_user_exists(db, email):
                raise ConflictError("Email already registered")
            user.email = email
        if name is not None:
            user.name = name
        if role is not None:
            user.role = role
        return user

    @staticmethod
    def create_account(db: Session, request: UserCreate) -> models.User:
        """
        Create a user with whatever role the request names.
        
        Raises:
            ConflictError: If the email is already registered
        """
        if AuthService.check_user_exists(db, request.email):
            raise ConflictError("Email already registered")

        try:
            user = auth_create_user(
                db=db,
                name=request.name,
                email=request.email,
                password=request.password,
                role=request.role
            )
        except IntegrityError:
            db.rollback()
            raise ConflictError("Email already registered")

        logger.info(f"Created {user.role.value} account {user.id} for {user.email}")
        return user
    
    @staticmethod
    def register_user(db: Session, request: RegisterRequest) -> AuthResponse:
        """
        Register a new account and sign it in.
        
        Args:
            db: Database session
            request: Registration data
            
        Returns:
            AuthResponse with user and access token
            
        Raises:
            ValidationError: If the requested role cannot be self-assigned
            ConflictError: If the email is already registered
        """
        if request.role not in SELF_SERVICE_ROLES:
            raise ValidationError(f"Role '{request.role.value}' cannot be self-assigned", field="role")

        user = AuthService.create_account(db, UserCreate(**request.model_dump()))
        access_token = AuthService.create_access_token_for_user(user)

        return AuthResponse(
            user=UserResponse.model_validate(user),
            access_token=access_token,
            token_type="bearer"
        )
    
    @staticmethod
    def login_user(db: Session, request: LoginRequest) -> AuthResponse:
        """
        Authenticate user and return login response.
        
        Args:
            db: Database session
            request: Login request data
            
        Returns:
            AuthResponse with user and access token
            
        Raises:
            AuthenticationError: If authentication fails
        """
        user = auth_authenticate_user(db, request.email, request.password)
        if not user:
            logger.warning(f"Failed login attempt for {request.email}")
            raise AuthenticationError("Incorrect email or password")
        
        access_token = AuthService.create_access_token_for_user(user)
        
        return AuthResponse(
            user=UserResponse.model_validate(user),
            access_token=access_token,
            token_type="bearer"
        )
