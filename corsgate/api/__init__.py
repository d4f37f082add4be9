# API package

from corsgate.api.handler import build_router, handler

__all__ = [
    "build_router",
    "handler",
]
