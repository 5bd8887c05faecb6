"""HTTP routes exposing the eligibility engine."""

from schemz.api.routes import router

__all__ = ["router"]
