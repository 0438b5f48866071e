# dependencies.py
import logging
from typing import Callable

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.errors import AuthenticationError, AuthorizationError
from app.models.user import ROLE_ADMIN, User
from app.schemas.user import TokenData
from app.utils.jwt_handler import decode_access_token


logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through the same AuthenticationError path.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_prefix}/auth/login", auto_error=False)

# Resources whose create/update/delete is restricted to administrators.
ADMIN_ONLY_RESOURCES = frozenset({"subjects", "combinations", "programs", "schools", "jobs", "admin"})
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def get_current_user(db: Session = Depends(get_db), token: str | None = Depends(oauth2_scheme)) -> User:
    if not token:
        raise AuthenticationError("No token provided")
    payload = decode_access_token(token)
    user_id = payload.get("sub")
    if user_id is None:
        raise AuthenticationError("Invalid token payload")
    try:
        token_data = TokenData(user_id=int(user_id))
    except ValueError as exc:
        raise AuthenticationError("Invalid token subject") from exc
    user = db.query(User).filter(User.id == token_data.user_id).first()
    if not user:
        raise AuthenticationError("User not found")
    return user


def can_mutate(user: User, resource: str) -> bool:
    if resource not in ADMIN_ONLY_RESOURCES:
        return True
    return user.role == ROLE_ADMIN


def authorize_mutation(db: Session, token: str | None, resource: str) -> User:
    current_user = get_current_user(db=db, token=token)
    if not can_mutate(current_user, resource):
        logger.info("authz.denied resource=%s user_id=%s role=%s", resource, current_user.id, current_user.role)
        raise AuthorizationError("Admin only access")
    return current_user


def mutation_resource(method: str, path: str) -> str | None:
    """Resource a create/update/delete request targets, or None when the gate does not apply."""

    if method.upper() not in MUTATING_METHODS:
        return None
    prefix = settings.api_prefix.rstrip("/") + "/"
    if not path.startswith(prefix):
        return None
    resource = path[len(prefix):].split("/", 1)[0]
    return resource if resource in ADMIN_ONLY_RESOURCES else None


def require_mutation(resource: str) -> Callable[..., User]:
    """Dependency gating create/update/delete on `resource` behind `can_mutate`."""

    def _require(db: Session = Depends(get_db), token: str | None = Depends(oauth2_scheme)) -> User:
        return authorize_mutation(db, token, resource)

    return _require


# Admin-only reads (e.g. dashboard stats) use the same predicate.
require_admin = require_mutation("admin")
