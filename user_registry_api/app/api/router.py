"""
Top-level API router.

The user routes spell out their full paths (``/user``, ``/users``,
``/update/user/{id}``, ``/delete/user/{id}``) because existing clients
call them verbatim, so no prefix is added when including them.
"""

from fastapi import APIRouter

from .endpoints import info, users

router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(info.router, tags=["info"])
