"""
Login, signup and user profile endpoints
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.core.exceptions import ConflictError, NotFoundError, ValidationError
from pathlab.core.security import hash_password_async, verify_password_async
from pathlab.db.session import get_db
from pathlab.models import User
from pathlab.schemas.common import Ack
from pathlab.schemas.user import LoginRequest, LoginResponse, SignupRequest, UserOut, UserProfile, UserResponse

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, db: AsyncSession = Depends(get_db)) -> LoginResponse:
    """
    Login
    Checks a username/password pair and returns the user the client keeps as its session
    """
    user = await db.scalar(select(User).where(User.username == request.username))
    if not user or not await verify_password_async(request.password, user.password):
        logger.info("Login rejected", username=request.username)
        raise ValidationError("Invalid username or password")

    logger.info("Login succeeded", user_id=user.user_id)
    return LoginResponse(user=UserOut.model_validate(user))


@router.post("/signup", response_model=Ack)
async def signup(request: SignupRequest, db: AsyncSession = Depends(get_db)) -> Ack:
    """Create a staff account"""
    if await db.scalar(select(User.user_id).where(User.username == request.username)):
        raise ConflictError("Username already exists")

    user = User(
        username=request.username,
        full_name=request.fullName,
        password=await hash_password_async(request.password),
        role=request.role,
        contact_number=request.contactNumber,
        question=request.securityQuestion,
        answer=request.securityAnswer,
    )
    db.add(user)
    await db.commit()

    logger.info("Account created", user_id=user.user_id, role=user.role)
    return Ack(message="Account created successfully")


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)) -> UserResponse:
    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")
    return UserResponse(user=UserProfile.model_validate(user))
