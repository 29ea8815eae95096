from __future__ import annotations

from fastapi import APIRouter, Depends

from records_api.core.config import settings
from records_api.core.dependencies import get_store
from records_api.services.record_store import RecordStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(store: RecordStore = Depends(get_store)):  # noqa: B008
    services: dict[str, str] = {}

    try:
        if store.backend_name == "in_memory":
            services["database"] = "in_memory"
        else:
            ok = await store.check_connection()
            services["database"] = "ok" if ok else "error"
    except Exception:
        services["database"] = "error"

    all_ok = all(v in ("ok", "in_memory") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_check():
    return {"ready": True}
