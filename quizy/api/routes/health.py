from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


def _check_generator(request: Request) -> dict[str, Any]:
    generator = getattr(request.app.state, "quiz_generator", None)
    if generator is None:
        return {"status": "failed", "error": "generator_not_configured"}
    return {"status": "ok", "model": generator.model.model_name}


@router.get("/live")
async def live() -> dict[str, str]:
    return {"status": "live"}


@router.get("/health")
async def health(request: Request) -> JSONResponse:
    checks = {"generator": _check_generator(request)}
    is_healthy = all(check.get("status") == "ok" for check in checks.values())
    return JSONResponse(
        status_code=status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ok" if is_healthy else "degraded",
            "checks": checks,
        },
    )
