"""
Authentication dependencies for FastAPI routes
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from ..core.exceptions import AuthenticationError, AuthorizationError
from ..database import get_db
from ..models.user import User
from .security import decode_access_token

security = HTTPBearer(auto_error=False)


def _user_from_credentials(
    credentials: Optional[HTTPAuthorizationCredentials],
    db: Session,
) -> Optional[User]:
    if not credentials or not credentials.credentials:
        return None
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        return None
    return db.query(User).filter(User.id == user_id).first()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to a user or fail with 401"""
    if not credentials:
        raise AuthenticationError("Access token required")

    user = _user_from_credentials(credentials, db)
    if not user:
        raise AuthenticationError("Invalid token")
    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Same as get_current_user, but suspended accounts may not act"""
    if current_user.is_blocked:
        raise AuthorizationError("Account is suspended")
    return current_user


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Guest access: an invalid or missing token yields None instead of 401"""
    return _user_from_credentials(credentials, db)
