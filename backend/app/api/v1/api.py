"""Module: api."""

# backend/app/api/v1/api.py
from fastapi import APIRouter

# Operational routes.
from app.api.v1.routes.health import router as health_router

# Domain routes.
from app.api.v1.routes.pets import router as pets_router


api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(pets_router, prefix="/pets", tags=["pets"])
