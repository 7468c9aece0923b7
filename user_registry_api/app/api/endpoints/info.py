"""
Service information and health endpoints.

``/info`` reports the configured project name and version.  ``/health``
runs a trivial query against the store so that deployments can tell a
running process from a usable one.
"""

import logging
from typing import Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from user_registry_api.app.core.config import settings
from user_registry_api.app.core.exceptions import StoreError
from user_registry_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/info", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    return {"name": settings.project_name, "version": settings.api_version}


@router.get("/health")
async def health_check():
    try:
        await UserService.ping()
    except StoreError as exc:
        logger.error("Health check failed: %s", exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"errorMessage": exc.message},
        )
    return {"status": "ok"}
