"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Available Routers:
    - upload_router: POST /upload (relay one file to the webhook)
"""

from .upload import router as upload_router

__all__ = ["upload_router"]
