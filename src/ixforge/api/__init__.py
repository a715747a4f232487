"""HTTP gateway."""

from .app import create_app

__all__: tuple[str, ...] = ("create_app",)
