from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio.config import get_settings
from portfolio.errors import PortfolioError
from portfolio.handlers import (
    auth_handler,
    certifications_handler,
    experiences_handler,
    messages_handler,
    projects_handler,
    public_handler,
    settings_handler,
    skills_handler,
    uploads_handler,
)
from portfolio.services.auth import get_auth_service

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    if get_auth_service.cache_info().currsize:
        await get_auth_service().close()


app = FastAPI(title=settings.project_name, lifespan=lifespan)

app.include_router(auth_handler.router)
app.include_router(public_handler.router)
app.include_router(messages_handler.router)
app.include_router(messages_handler.admin_router)
app.include_router(projects_handler.router)
app.include_router(skills_handler.router)
app.include_router(certifications_handler.router)
app.include_router(experiences_handler.router)
app.include_router(settings_handler.router)
app.include_router(uploads_handler.router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortfolioError)
async def portfolio_error_handler(request: Request, exc: PortfolioError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
