"""Health check endpoint."""

from __future__ import annotations

from typing import Dict

from fastapi import FastAPI


def register_health_routes(app: FastAPI) -> None:
    """Register the liveness endpoint."""

    @app.get("/api/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}
