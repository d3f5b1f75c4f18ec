"""API router initialization."""

from fastapi import APIRouter
from loguru import logger

from clinic_registry.api.doctors import router as doctors_router

router = APIRouter()

router.include_router(doctors_router, tags=["doctors"])

logger.debug("API router initialized (doctors router mounted)")
