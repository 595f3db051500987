import pytest
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from taskboard.models import User
from taskboard.enums import UserRole

class TestUser:
    def test_create_user(self, db_session: Session):
        user = User(
            name="Test User",
            email="test@example.com",
            password_hash="hashed_password"
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)

        assert user.id is not None
        assert user.role == UserRole.DEVELOPER
        assert user.is_admin is False
        assert user.created_at is not None

    def test_user_email_unique(self, db_session: Session):
        db_session.add(User(name="One", email="test@example.com", password_hash="password1"))
        db_session.commit()

        db_session.add(User(name="Two", email="test@example.com", password_hash="password2"))
        with pytest.raises(IntegrityError):
            db_session.commit()
