# /qa_suite/main.py

# --- Core FastAPI Imports ---
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    generate_router,
    prompts_router,
    session_router,
    history_router,
    dashboard_router,
    tools_router,
    uploads_router,
)

# --- Startup Dependencies ---
from .core.config import CORS_ORIGINS, SCREENSHOT_UPLOADS_DIR, SCREENSHOT_URL_PREFIX
from .db.base import Base
from .db.database import engine

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once on startup: make sure the tables and the screenshot bucket exist.
    Base.metadata.create_all(bind=engine)
    os.makedirs(SCREENSHOT_UPLOADS_DIR, exist_ok=True)
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="AI QA Suite API",
    description="Prompt-driven QA helpers: test generation, error explanation and bug reporting, with per-session history.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(generate_router.router, prefix="/api", tags=["Generation"])
app.include_router(prompts_router.router, prefix="/api/prompts", tags=["Prompts"])
app.include_router(session_router.router, prefix="/api", tags=["Session"])
app.include_router(history_router.router, prefix="/api/history", tags=["History"])
app.include_router(dashboard_router.router, prefix="/api", tags=["Stats"])
app.include_router(tools_router.router, prefix="/api/tools", tags=["AI Tools"])
app.include_router(uploads_router.router, prefix="/api/uploads", tags=["Uploads"])

# --- Public Screenshot Bucket ---
app.mount(
    SCREENSHOT_URL_PREFIX,
    StaticFiles(directory=SCREENSHOT_UPLOADS_DIR, check_dir=False),
    name="screenshots",
)

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "AI QA Suite backend is running!", "version": app.version}
