from fastapi import APIRouter, HTTPException, status
from sqlalchemy import select

from datavault.api.deps import CurrentUser, DbSession
from datavault.models.user import User
from datavault.schemas.user import UserCreate, UserRead, UserWithApiKey
from datavault.utils.security import generate_api_key

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserWithApiKey, status_code=status.HTTP_201_CREATED)
async def register(payload: UserCreate, db: DbSession) -> UserWithApiKey:
    """Open a vault for a new owner. The API key is only ever shown here."""
    email = payload.email.lower()
    if await db.scalar(select(User.id).where(User.email == email)) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    owner = User(email=email, full_name=payload.full_name, api_key=generate_api_key())
    db.add(owner)
    await db.commit()
    await db.refresh(owner)
    return UserWithApiKey.model_validate(owner)


@router.get("/me", response_model=UserRead)
async def whoami(current_user: CurrentUser) -> UserRead:
    return UserRead.model_validate(current_user)
