"""ASGI entrypoint: `uvicorn app.main:app`"""
import logging

from app import config

# Root logging must be configured before the routers create their loggers
# ruff: noqa: E402
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.base import api_router

API_VERSION = "1.0.0"

app = FastAPI(
    title="Obligations Backend API",
    description=(
        "Recurring fiscal obligations for accounting offices: templates, "
        "clients, per-competence task generation and due dates"
    ),
    version=API_VERSION,
)

# Browser clients of each office call the API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(api_router)

logging.getLogger(__name__).info(
    f"Obligations API {API_VERSION} ready (CORS origins: {', '.join(config.CORS_ALLOW_ORIGINS)})"
)


@app.get("/")
def service_info():
    """Service name, version and where the interactive docs live"""
    return {
        "service": "obligations-backend",
        "version": API_VERSION,
        "docs": "/docs",
        "api": "/api",
    }
