"""
UNiDBox - Backend API
Wholesale ordering backend for the storefront, dealer portal and admin console
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from unidbox.core.config import settings
from unidbox.core.database import engine
from unidbox.core.exceptions import InvalidInput, RPCError
from unidbox.repositories.reference_repository import init_reference_data
from unidbox.rpc import api as rpc_api

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = settings.get_allowed_origins()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_reference_data()
    logger.info(f"{settings.API_TITLE} {settings.API_VERSION} started")
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan,
)

# Configure CORS with both specific origins and Vercel regex pattern
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https://.*\.vercel\.app",  # Allow all Vercel preview/production deployments
    allow_origins=ALLOWED_ORIGINS,  # Also allow specific origins from env (localhost + production)
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RPCError)
async def rpc_error_handler(request: Request, exc: RPCError):
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported like any other bad input"""
    details = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    error = InvalidInput("Malformed request", details=details)
    return JSONResponse(status_code=error.http_status, content=error.to_dict())


# Include API routers
app.include_router(rpc_api.router)


@app.get("/")
def root():
    """Root endpoint - API status check"""
    return {
        "message": f"{settings.API_TITLE} - Wholesale Ordering",
        "status": "online",
        "version": settings.API_VERSION,
        "rpc": settings.RPC_PREFIX,
    }


@app.get("/health")
def health():
    """Health check endpoint for monitoring - tests database connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        with engine.connect() as conn:
            db_start = time.time()
            conn.execute(text("SELECT 1"))
            db_latency_ms = round((time.time() - db_start) * 1000, 2)
        db_status = "connected"
    except Exception as e:
        logger.warning(f"Health check database error: {e}")
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    status = "healthy" if db_status == "connected" else "degraded"

    return {
        "status": status,
        "service": "unidbox-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
        },
        "total_latency_ms": total_latency_ms,
    }
