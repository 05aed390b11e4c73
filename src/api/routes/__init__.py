"""Rotas HTTP: adapters de entrada.

- routes/health/: liveness probe
- routes/auth_events/: push de eventos do Firebase Authentication
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
