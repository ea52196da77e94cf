"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from core.errors import BaseIdError, SecureRandomUnavailable
from ident.generator import Generator, configure as configure_generator, tracking_id
from ident.parser import parse
from internal.health import (
    HealthChecker,
    check_event_loop,
    create_codec_check,
    create_entropy_check,
)
from internal.logging import StructuredLogger, get_logger, parse_level
from ui.routes import health, ids

VERSION = "1.0.0"


def create_app(config=None, generator=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    logger_instance = get_logger()

    # Create core components
    if generator is None:
        generator = Generator(allow_insecure_random=config.generator.allow_insecure_random)
    configure_generator(generator)
    health_checker = HealthChecker()

    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("entropy", create_entropy_check(generator), critical=True)
    health_checker.register("codec", create_codec_check(generator, parse), critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger_instance.info("Application starting", version=VERSION,
                             hidden_default=config.generator.hidden)
        generator.check()
        if generator.degraded:
            logger_instance.warn("Generator running on weak random source",
                                 source=generator.random_source.name)
        logger_instance.info("Application started successfully")

        yield

        # Shutdown
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="NFUID",
        version=VERSION,
        description="compact time-ordered ID service",
        lifespan=lifespan,
    )

    @app.exception_handler(BaseIdError)
    async def id_error_handler(request: Request, exc: BaseIdError):
        error_id = tracking_id()
        logger_instance.warn("Rejected ID request", error=exc, error_id=error_id,
                             path=request.url.path, **exc.context)
        body = exc.to_dict()
        body["error_id"] = error_id
        status_code = 503 if isinstance(exc, SecureRandomUnavailable) else 400
        return JSONResponse(status_code=status_code, content=body)

    # Initialize route modules with dependencies
    ids.init(generator, config)
    health.init(generator, health_checker)

    # Include routers
    app.include_router(ids.router)
    app.include_router(health.router)

    return app
