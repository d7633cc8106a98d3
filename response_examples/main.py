from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from response_examples.config import get_settings
from response_examples.exception_handlers import register_exception_handlers
from response_examples.store import ProductStore
from response_examples.api import products, errors, health

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up application...")

    # The store lives for the lifetime of the process; nothing is persisted
    app.state.product_store = ProductStore(seed=settings.SEED_SAMPLE_DATA)
    logger.info("Product store ready with %d products", len(app.state.product_store))

    yield

    # Shutdown
    logger.info("Shutting down application...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    A RESTful API for managing products with full CRUD operations.

    - **Products**: In-memory product inventory with create, read, update and delete
    - **Error Examples**: One endpoint per HTTP error status, each returning a
      standardized problem details body (RFC 9457)

    ## Error responses

    Every error is returned as `application/problem+json` with `type`, `title`,
    `status` and `detail`. Validation failures add an `errors` object listing
    every invalid field. Unexpected failures are reported as a generic 500.
    """,
    version=settings.APP_VERSION,
    contact={
        "name": "API Support",
        "email": "support@example.com"
    },
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    },
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Translate every error into a problem details response
register_exception_handlers(app)

# Include API routers
app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(products.router, prefix=settings.API_PREFIX)
app.include_router(errors.router, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": f"{settings.API_PREFIX}/health"
    }
