# auth.py
import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config import is_admin_email, settings
from app.database import get_db
from app.errors import AuthenticationError, ValidationError
from app.models.user import ROLE_ADMIN, ROLE_USER, User
from app.schemas.user import Token, UserCreate, UserLogin, UserRead
from app.utils.jwt_handler import create_access_token
from app.utils.password_hash import hash_password, verify_password


router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    email = user_in.email.lower()
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise ValidationError("Email already registered")
    # Any client-supplied role is ignored; admins come from the allow-list.
    role = ROLE_ADMIN if is_admin_email(email) else ROLE_USER
    user = User(
        email=email,
        password=hash_password(user_in.password),
        name=user_in.name,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("auth.register user_id=%s role=%s", user.id, user.role)
    return UserRead.model_validate(user)


@router.post("/login", response_model=Token)
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> Token:
    user = db.query(User).filter(User.email == user_in.email.lower()).first()
    if not user or not verify_password(user_in.password, user.password):
        raise AuthenticationError("Invalid credentials")
    expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    token = create_access_token({"sub": str(user.id)}, expires_delta)
    return Token(access_token=token, token_type="bearer", user=UserRead.model_validate(user))
