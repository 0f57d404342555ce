"""
Diff Service Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import about, config, diff, modules, projects
from services.config_manager import ConfigManager
from services.file_type_registry import FileTypeRegistry
from services.ui_task_queue import UITaskQueue


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Diff Service Backend...")
    ConfigManager.get_instance()
    print("[Backend] ConfigManager initialized")

    registry = FileTypeRegistry.get_instance()
    print(f"[Backend] FileTypeRegistry initialized with {len(registry.get_registered_file_types())} file types")

    # Diff windows are opened from this queue, not from request handlers
    ui_task_queue = UITaskQueue.get_instance()
    await ui_task_queue.start()

    yield
    print("[Backend] Shutting down Diff Service Backend...")
    await ui_task_queue.stop()


app = FastAPI(
    title="Diff Service Backend",
    description="Open posted contents in diff windows of the running IDE host",
    version="1.0.0",
    lifespan=lifespan,
)

# Clients are local tools and browser pages
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api", tags=["diff"])
app.include_router(about.router, prefix="/api", tags=["about"])
app.include_router(projects.router, prefix="/api/projects", tags=["projects"])
app.include_router(modules.router, prefix="/api/modules", tags=["modules"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "diff-service-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=server.get("port", 63342))
