"""
Marketplace Listing Service - Main FastAPI Application

Clients upload items (name, category, image) and read them back by id
or in bulk. Images are stored content-addressed and served by hash.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .config import settings
from .api import api_router
from .schemas.message import MessageResponse
from .utils.database import engine, init_db
from .utils.errors import register_exception_handlers
from .utils.logging import setup_logging, get_logger, configure_uvicorn_logging
from .utils.metrics import setup_metrics

# Setup structured logging
setup_logging(log_level=settings.LOG_LEVEL)
configure_uvicorn_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""

    # Startup
    logger.info(
        "Starting Marketplace Listing Service",
        version=settings.VERSION,
        storage_backend=settings.STORAGE_BACKEND
    )

    if settings.STORAGE_BACKEND == "sqlite":
        # Errors here abort startup
        logger.info("Initializing database", url=settings.DATABASE_URL)
        init_db()

    logger.info("Marketplace Listing Service started successfully")

    yield

    # Shutdown
    logger.info("Shutting down Marketplace Listing Service")
    engine.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    # Marketplace Listing API

    - `POST /items` uploads an item as a multipart form (`name`, `category`
      or `category_id`, and an `image` file)
    - `GET /items` and `GET /items/{id}` read items back
    - `POST /categories` registers a category usable through `category_id`
    - `GET /image/{image_filename}` serves stored images by content hash
    """,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "items", "description": "Item upload and retrieval"},
        {"name": "categories", "description": "Category management"},
        {"name": "images", "description": "Content-addressed image retrieval"},
    ]
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONT_URL],
    allow_methods=["GET", "PUT", "POST", "DELETE"],
)

register_exception_handlers(app)

# Setup Prometheus metrics
setup_metrics(app)

# Include routers
app.include_router(api_router)


# Middleware for logging requests
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests"""
    logger.info(
        "Request received",
        method=request.method,
        url=str(request.url),
        client=request.client.host if request.client else None
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code
    )

    return response


@app.get("/", tags=["root"], response_model=MessageResponse)
def root():
    """Root endpoint"""
    return MessageResponse(message="Hello, world!")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "marketplace.main:app",
        host=settings.HOST,
        port=settings.PORT
    )
