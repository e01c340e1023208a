from .snapshot_router import router as snapshot_router
from .health_router import router as health_router

__all__ = ["snapshot_router", "health_router"]
