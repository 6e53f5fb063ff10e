"""
Luma admin API routers.
"""

from luma_admin.routers.settings import router as settings_router
from luma_admin.routers.admin import router as admin_router

__all__ = [
    "settings_router",
    "admin_router",
]
