"""API layer package for FastAPI application and route composition."""

from .application import create_api_application
from .auth import DEV_TOKEN, StaticTokenValidator, TokenValidatorPort
from .errors import AppError

__all__ = ["AppError", "DEV_TOKEN", "StaticTokenValidator", "TokenValidatorPort", "create_api_application"]
