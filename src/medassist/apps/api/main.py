from __future__ import annotations

from uuid import uuid4

import uvicorn
from fastapi import FastAPI

from medassist.core.logging import configure_logging
from medassist.core.logging.context import log_context

from .deps import get_scheduler_service, get_session_registry, get_settings
from .routes_catalog import router as catalog_router
from .routes_chat import router as chat_router
from .routes_sessions import router as sessions_router
from .routes_uploads import router as uploads_router

app = FastAPI(title="MedAssist API")
configure_logging(get_settings())

app.include_router(sessions_router, prefix="/sessions", tags=["sessions"])
app.include_router(chat_router, prefix="/sessions", tags=["chat"])
app.include_router(uploads_router, prefix="/sessions", tags=["uploads"])
app.include_router(catalog_router, tags=["catalog"])


@app.middleware("http")
async def request_context_middleware(request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid4())
    with log_context(correlation_id=correlation_id):
        response = await call_next(request)
    response.headers["X-Correlation-ID"] = correlation_id
    return response


@app.on_event("startup")
def startup() -> None:
    app.state.settings = get_settings()
    app.state.session_registry = get_session_registry()
    app.state.scheduler_service = get_scheduler_service()
    app.state.scheduler_service.start()


@app.on_event("shutdown")
def shutdown() -> None:
    get_scheduler_service().shutdown()


@app.get("/healthz")
def healthz() -> dict[str, object]:
    return {
        "ok": True,
        "sessions": len(app.state.session_registry),
        "pending_jobs": len(app.state.scheduler_service.list_jobs()),
    }


def run() -> None:
    uvicorn.run("medassist.apps.api.main:app", reload=True, host="127.0.0.1", port=8000)
