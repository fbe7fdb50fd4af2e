# dafurn/api/routers/users.py
from fastapi import APIRouter, Depends, HTTPException, Response, status

from dafurn.api.deps import get_user_repository
from dafurn.core.errors import InvalidIdentifierError
from dafurn.models.user import User
from dafurn.repositories.user_repository import UserRepository
from dafurn.schemas.user import RatingUpdateIn, UserOut

router = APIRouter(prefix="/users", tags=["users"])


def _user_to_dict(u: User) -> dict:
    """
    Convert User model instance to dictionary format for API responses.
    """
    return {
        "id": str(u.id),
        "username": u.username,
        "avatar": u.avatar,
        "bio": u.bio,
        "rating": u.rating,
        "email": u.email,
        "createdAt": u.created_at.isoformat() if u.created_at else None,
        "updatedAt": u.updated_at.isoformat() if u.updated_at else None,
    }


def _invalid_id() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="INVALID_USER_ID")


@router.get("", response_model=list[UserOut])
async def list_users(repo: UserRepository = Depends(get_user_repository)):
    """
    Get every user. No filtering, ordering or pagination.

    Raises:
        StorageUnavailableError: mapped to 503 by the application handler
    """
    users = await repo.list_all()
    return [_user_to_dict(u) for u in users]


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repository)):
    """
    Get a single user by id.

    Raises:
        HTTPException (400): If user_id is not a valid identifier
        HTTPException (404): If no user has this id
    """
    try:
        u = await repo.find_by_id(user_id)
    except InvalidIdentifierError:
        raise _invalid_id()
    if not u:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="USER_NOT_FOUND")
    return _user_to_dict(u)


@router.put("/{user_id}", response_model=UserOut)
async def update_user_rating(
    user_id: str,
    body: RatingUpdateIn,
    repo: UserRepository = Depends(get_user_repository),
):
    """
    Replace the rating of a user and return the updated record.

    The rating is only coerced to a number; its range is not checked.

    Raises:
        HTTPException (400): If user_id is not a valid identifier
        HTTPException (404): If no user has this id
        HTTPException (422): If the body has no rating coercible to a number
    """
    try:
        u = await repo.update_rating(user_id, body.rating)
    except InvalidIdentifierError:
        raise _invalid_id()
    if not u:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="USER_NOT_FOUND")
    return _user_to_dict(u)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, repo: UserRepository = Depends(get_user_repository)):
    """
    Delete a user. Deleting an id that does not exist is not an error.

    Raises:
        HTTPException (400): If user_id is not a valid identifier
    """
    try:
        await repo.delete_by_id(user_id)
    except InvalidIdentifierError:
        raise _invalid_id()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
