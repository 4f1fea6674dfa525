"""User API routes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lightbnb.api.deps import get_store
from lightbnb.database import Store
from lightbnb.schemas.user import UserCreate, UserResponse
from lightbnb.services.users import add_user, get_user_with_email, get_user_with_id

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found",
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a user",
)
async def create_user(
    body: UserCreate,
    store: Store = Depends(get_store),
) -> UserResponse:
    user = await add_user(store, body)
    return UserResponse.model_validate(user)


@router.get(
    "",
    response_model=UserResponse,
    summary="Look up a user by email",
)
async def find_user(
    email: str = Query(..., min_length=1),
    store: Store = Depends(get_store),
) -> UserResponse:
    """Case-insensitive email lookup. Returns 404 if no user matches."""
    user = await get_user_with_email(store, email)
    if user is None:
        raise _not_found()
    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
async def get_user(
    user_id: int,
    store: Store = Depends(get_store),
) -> UserResponse:
    user = await get_user_with_id(store, user_id)
    if user is None:
        raise _not_found()
    return UserResponse.model_validate(user)
