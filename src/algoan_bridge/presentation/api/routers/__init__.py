"""API routers."""

from algoan_bridge.presentation.api.routers.hooks import router as hooks_router

__all__ = [
    "hooks_router",
]
