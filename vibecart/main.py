import uvicorn as uvicorn
from fastapi import FastAPI, Request, HTTPException, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
import redis.asyncio as redis
from pathlib import Path
import logging

from vibecart.config.settings import settings
from vibecart.config.database import startDB
from vibecart.crud.productService import ProductService
from vibecart.commonUtils.exceptions import CartIntegrityError
from vibecart.dependencies.session_dependencies import SESSION_RESPONSE_HEADER
from vibecart.routes import productRoute, cartRoute, checkOutRoute, healthRoute

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


# Initialize FastAPI app with lifespan context
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database connection and models (startup logic)
    await startDB()

    if settings.SEED_ON_STARTUP:
        await ProductService.seed_products()

    # Initialize rate limiter
    if settings.RATE_LIMITING_ENABLED:
        redis_connection = redis.from_url(settings.REDIS_URL, encoding="utf-8")
        await FastAPILimiter.init(redis_connection)

    logger.info(f"✅ Vibe Cart API ready ({settings.ENVIRONMENT})")
    yield

    if settings.RATE_LIMITING_ENABLED:
        await FastAPILimiter.close()


app = FastAPI(
    title="Vibe Cart",
    lifespan=lifespan,
    docs_url=None if settings.ENVIRONMENT.lower() == "production" else "/docs",
    redoc_url=None if settings.ENVIRONMENT.lower() == "production" else "/redoc"
)


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler that formats all errors consistently"""
    error_response = {
        "error": {
            "type": exc.__class__.__name__,
            "message": "An error occurred",
            "detail": str(exc),
            "path": request.url.path,
        }
    }

    status_code = 500

    # Handle HTTP exceptions (404, 400, etc.)
    if isinstance(exc, (HTTPException, StarletteHTTPException)):
        status_code = exc.status_code
        error_response["error"]["message"] = exc.detail
        error_response["error"]["detail"] = exc.detail

    # Handle validation errors
    elif isinstance(exc, RequestValidationError):
        status_code = 422
        error_response["error"]["message"] = "Validation error"
        error_response["error"]["detail"] = jsonable_encoder(exc.errors())

    # Log unexpected errors
    if status_code == 500:
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        error_response["error"]["message"] = "Internal server error"
        # Don't expose internal details
        error_response["error"]["detail"] = "Please contact support"

    return JSONResponse(
        status_code=status_code,
        content=error_response
    )


# Register the handler for all exceptions
app.add_exception_handler(StarletteHTTPException, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(CartIntegrityError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[SESSION_RESPONSE_HEADER],
)

rate_limits = [Depends(RateLimiter(times=100, seconds=60))] if settings.RATE_LIMITING_ENABLED else []

app.include_router(productRoute.router, tags=['products'], prefix='/api', dependencies=rate_limits)
app.include_router(cartRoute.router, tags=['cart'], prefix='/api', dependencies=rate_limits)
app.include_router(checkOutRoute.router, tags=['checkout'], prefix='/api', dependencies=rate_limits)
app.include_router(healthRoute.router, tags=['health'], prefix='/api')

# Single-page frontend; registered last so /api routes win
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="frontend")


if __name__ == "__main__":
    uvicorn.run("vibecart.main:app", host="0.0.0.0", port=settings.PORT, reload=True, log_level="info")
