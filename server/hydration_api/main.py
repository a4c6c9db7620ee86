"""Hydration Analytics API - FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import quality, stats, achievements, guidance

settings = get_settings()

app = FastAPI(
    title="Hydration Analytics API",
    description="Stateless analytics over drink logs: quality grades, stats and achievements",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(quality.router)
app.include_router(stats.router)
app.include_router(achievements.router)
app.include_router(guidance.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "hydration-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.hydration_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
