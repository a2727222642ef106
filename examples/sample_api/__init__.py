"""Sample API -- minimal FastAPI app exposing the current login.

Modules:
    router: FastAPI endpoints (GET /api/test, /api/test/required, /api/test/user)
    app:    Application factory (create_sample_app)
"""

from .app import create_sample_app

__all__ = ["create_sample_app"]
