"""
Duckworth-Lewis Calculator API
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dlc.config import settings, configure_logging
from dlc.database import init_db
from dlc.api.match import router as match_router, resources_router

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store tables before serving"""
    init_db()
    yield


app = FastAPI(
    title="Duckworth-Lewis Calculator",
    description="Revised targets for weather affected limited overs matches (Standard Edition)",
    version="0.1.0",
    lifespan=lifespan,
)

LOCAL_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


def cors_origins(extra: str) -> list:
    """Local front ends plus any comma-separated origins from CORS_ORIGINS"""
    return LOCAL_ORIGINS + [o.strip() for o in extra.split(",") if o.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(settings.CORS_ORIGINS),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(match_router, prefix="/api")
app.include_router(resources_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "Duckworth-Lewis Calculator API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
