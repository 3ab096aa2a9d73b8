from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
from typing import Callable, Optional
import uvicorn
from redis.asyncio import Redis
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from sih_portal.core.config.settings import Settings, get_settings
from sih_portal.core.config.logging_config import setup_logging
from sih_portal.core.exceptions import AppError
from sih_portal.db.init_db import init_db
from sih_portal.db.session import create_db_engine, create_session_factory
from sih_portal.routers import jury, submissions


def format_validation_errors(errors) -> str:
    """Join pydantic errors into one message naming every failing field"""
    messages = []
    for error in errors:
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{field or 'body'}: {error.get('msg')}")
    return "; ".join(messages)


def check_database(session_factory) -> bool:
    try:
        with session_factory() as db:
            db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logging.getLogger("sih_portal").error(f"Database health check failed: {str(e)}")
        return False
    return True


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = setup_logging(settings.LOG_DIR, settings.LOG_LEVEL)

    # The store handle is owned here and reaches handlers only through get_db
    engine = create_db_engine(settings.DATABASE_URL)
    init_db(engine)
    logger.info("Database initialized successfully")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.redis = None

    @app.on_event("startup")
    async def startup_event():
        # Initialize Redis if URL is configured
        if settings.REDIS_URL:
            try:
                redis = Redis.from_url(
                    settings.REDIS_URL,
                    encoding="utf-8",
                    decode_responses=True
                )
                await redis.ping()
                app.state.redis = redis
                logger.info("Redis connection established")
            except Exception as e:
                logger.error(f"Failed to connect to Redis: {str(e)}")

    @app.on_event("shutdown")
    async def shutdown_event():
        if app.state.redis:
            await app.state.redis.close()
            logger.info("Redis connection closed")
        engine.dispose()

    # Middleware for request logging
    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable):
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        logger.info(
            f"Method: {request.method} Path: {request.url.path} "
            f"Status: {response.status_code} Duration: {duration:.2f}s"
        )
        return response

    # Rate limiting middleware
    @app.middleware("http")
    async def rate_limit(request: Request, call_next: Callable):
        redis = request.app.state.redis
        if redis:
            client_ip = request.client.host if request.client else "unknown"
            key = f"rate_limit:{client_ip}"
            requests = await redis.incr(key)

            if requests == 1:
                await redis.expire(key, 60)  # Reset after 60 seconds

            if requests > settings.RATE_LIMIT_PER_MINUTE:
                return JSONResponse(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    content={"error": "Too many requests"}
                )

        return await call_next(request)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(submissions.router, prefix=settings.API_PREFIX)
    app.include_router(jury.router, prefix=settings.API_PREFIX)

    # Exception handlers
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}")
        else:
            logger.info(f"{type(exc).__name__}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = format_validation_errors(exc.errors())
        logger.info(f"ValidationError: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.error(f"HTTP Exception: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled Exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get(f"{settings.API_PREFIX}/health")
    async def health_check():
        status_info = {
            "ok": True,
            "timestamp": time.time(),
            "database": "connected",
            "redis": "connected" if app.state.redis else "not configured"
        }

        # Blocking driver call, kept off the event loop
        if not await run_in_threadpool(check_database, app.state.session_factory):
            status_info["database"] = "disconnected"
            status_info["ok"] = False

        # Check Redis connection if configured
        if app.state.redis:
            try:
                await app.state.redis.ping()
            except Exception as e:
                status_info["redis"] = "disconnected"
                status_info["ok"] = False
                logger.error(f"Redis health check failed: {str(e)}")

        return status_info

    return app


def run():
    settings = get_settings()
    uvicorn.run("sih_portal.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
