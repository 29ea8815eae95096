from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from records_api.api.router import api_router
from records_api.core.config import Settings, settings
from records_api.core.exceptions import RecordsApiError
from records_api.services.cosmos_record_store import CosmosRecordStore
from records_api.services.file_storage import LocalFileStorage
from records_api.services.record_store import InMemoryRecordStore, RecordStore

logger = logging.getLogger(__name__)


async def create_store(config: Settings) -> RecordStore:
    if not config.COSMOS_DB_ENDPOINT or not config.COSMOS_DB_KEY:
        logger.warning("Cosmos DB credentials missing; using in-memory record store")
        return InMemoryRecordStore()

    store = CosmosRecordStore()
    await store.initialize(config)
    return store


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    logging.getLogger("records_api").setLevel(settings.LOG_LEVEL)
    application.state.store = await create_store(settings)
    application.state.file_storage = LocalFileStorage.from_settings(settings)
    yield
    await application.state.store.close()


app = FastAPI(
    title="Employee Records API",
    description="Employees, departments and employee document attachments",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RecordsApiError)
async def records_api_error_handler(request: Request, exc: RecordsApiError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed unexpectedly", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Records API"}
