"""Service mode for inspecting registered metadata over HTTP."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]
