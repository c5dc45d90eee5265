"""
Registration, login and current-user routes
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..auth.dependencies import get_current_user
from ..auth.security import hash_password, verify_password, create_access_token
from ..core.exceptions import ValidationError, AuthenticationError, AuthorizationError
from ..core.logging import get_logger
from ..database import get_db
from ..models.user import User
from ..schemas.user import UserCreate, UserLogin, UserResponse, AuthResponse

router = APIRouter()

logger = get_logger(__name__)


@router.post("/register", response_model=AuthResponse)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create an account and return it with an access token"""
    existing = db.query(User).filter(
        or_(User.email == user_data.email, User.username == user_data.username)
    ).first()
    if existing:
        raise ValidationError("User already exists")

    user_dict = user_data.model_dump(exclude={"password"})
    user = User(
        **user_dict,
        hashed_password=hash_password(user_data.password),
        created_by=user_data.username
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("User already exists")
    db.refresh(user)

    logger.info(f"Registered user {user.id} ({user.username})")
    return AuthResponse(user=UserResponse.model_validate(user), token=create_access_token(user.id))


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        raise AuthenticationError("Invalid credentials")

    if user.is_blocked:
        raise AuthorizationError("Account is suspended")

    user.last_active = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)

    return AuthResponse(user=UserResponse.model_validate(user), token=create_access_token(user.id))


@router.get("/me", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
