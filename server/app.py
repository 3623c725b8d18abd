"""FastAPI application for the doc-flow workspace."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# must run before the server modules read their settings
load_dotenv()  # load environment variables from .env file

from server.db import init_all
from server.document_db import DOCFLOW_DB_PATH
from server.document_routes import router as document_router
from server.project_routes import router as project_router
from server.runner_routes import router as runner_router

logging.basicConfig(
    level=os.getenv("DOCFLOW_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# CORS origins - configurable via environment variable
# Use comma-separated values for multiple origins, or "*" for all (development only)
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database tables on startup."""
    init_all()
    yield


app = FastAPI(
    title="Doc-Flow API",
    description="API server for workspace documents and interactive flow runs",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routes
app.include_router(document_router, prefix="/api")
app.include_router(project_router, prefix="/api")
app.include_router(runner_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "0.1.0",
        "db": str(DOCFLOW_DB_PATH),
        "endpoints": {
            "documents": "/api/documents",
            "projects": "/api/projects",
            "runner": "/api/runner/sessions",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
