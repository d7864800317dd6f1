import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from janseva.config import settings
from janseva.database import connect_to_mongo, close_mongo_connection, ping
from janseva.routes import admin_router, eligibility_router, profile_router, programs_router

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    yield
    # Shutdown
    await close_mongo_connection()


app = FastAPI(
    title=settings.app_name,
    description="Find government schemes and scholarships you are eligible for",
    version=settings.app_version,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(eligibility_router)
app.include_router(programs_router)
app.include_router(profile_router)
app.include_router(admin_router)


@app.get("/")
async def root():
    return {"message": f"{settings.app_name} is running", "version": settings.app_version}


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    database_ok = await ping()
    return {
        "status": "healthy" if database_ok else "degraded",
        "service": "janseva-backend",
        "database": "connected" if database_ok else "unavailable"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("janseva.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
