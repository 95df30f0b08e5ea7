# src/chirpy/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .chirps import router as chirps_router
from .system import admin_router, router as system_router
from .users import router as users_router

__all__ = [
    "admin_router",
    "auth_router",
    "chirps_router",
    "system_router",
    "users_router",
]
