"""
API v1 router.
"""
from fastapi import APIRouter

from app.api.v1.endpoints import analyze, health

api_router = APIRouter()

# Health check endpoint (no prefix, so it's /api/v1/health)
api_router.include_router(health.router, tags=["health"])

api_router.include_router(analyze.router, tags=["analysis"])
