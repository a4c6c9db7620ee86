"""API route modules."""
from .quality import router as quality_router
from .stats import router as stats_router
from .achievements import router as achievements_router
from .guidance import router as guidance_router

__all__ = [
    "quality_router",
    "stats_router",
    "achievements_router",
    "guidance_router",
]
