"""
User endpoints.

Five routes cover the lifecycle of a user record: create, list, fetch
by id, full update and delete.  Write operations answer with a short
``{"message": ...}`` confirmation.  Conflicts (400) and unknown ids
(404) are reported as ``{"message": ...}`` while database failures
(500) carry the driver's message as ``{"errorMessage": ...}``.
"""

import logging
from typing import List

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from user_registry_api.app.core.exceptions import StoreError, UserServiceError
from user_registry_api.app.schemas.user import (
    ErrorResponse,
    MessageResponse,
    UserCreate,
    UserRead,
    UserUpdate,
)
from user_registry_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
_CONFLICT = {status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}}


def _error_response(exc: UserServiceError) -> JSONResponse:
    """Translate a service exception into its JSON response.

    Must be called from the ``except`` block handling ``exc``.
    """
    if isinstance(exc, StoreError):
        logger.exception("Store failure: %s", exc.message)
        return JSONResponse(status_code=exc.status_code, content={"errorMessage": exc.message})
    logger.warning("%s (%s)", exc.message, exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@router.post(
    "/user",
    response_model=MessageResponse,
    responses={**_CONFLICT, **_ERROR_RESPONSES},
)
async def create_user(user: UserCreate):
    """Register a new user.

    Rejected with 400 when another user already has the same email.
    """
    try:
        await UserService.create_user(user)
    except UserServiceError as exc:
        return _error_response(exc)
    return MessageResponse(message="User created successfully")


@router.get(
    "/users",
    response_model=List[UserRead],
    responses={**_NOT_FOUND, **_ERROR_RESPONSES},
)
async def list_users():
    """Return every user; an empty collection is reported as 404."""
    try:
        users = await UserService.list_users()
    except UserServiceError as exc:
        return _error_response(exc)
    if not users:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "User data not found."},
        )
    return users


@router.get(
    "/user/{user_id}",
    response_model=UserRead,
    responses={**_NOT_FOUND, **_ERROR_RESPONSES},
)
async def get_user(user_id: str):
    try:
        return await UserService.get_user_by_id(user_id)
    except UserServiceError as exc:
        return _error_response(exc)


@router.put(
    "/update/user/{user_id}",
    response_model=MessageResponse,
    responses={**_CONFLICT, **_NOT_FOUND, **_ERROR_RESPONSES},
)
async def update_user(user_id: str, user: UserUpdate):
    """Replace all fields of an existing user.

    The payload must contain the complete record; fields are not merged
    with the stored values.
    """
    try:
        await UserService.update_user(user_id, user)
    except UserServiceError as exc:
        return _error_response(exc)
    return MessageResponse(message="User Updated Successfully")


@router.delete(
    "/delete/user/{user_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_ERROR_RESPONSES},
)
async def delete_user(user_id: str):
    try:
        await UserService.delete_user(user_id)
    except UserServiceError as exc:
        return _error_response(exc)
    return MessageResponse(message="User deleted successfully")
