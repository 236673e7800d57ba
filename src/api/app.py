from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.api.middleware.request_logging import RequestLoggingMiddleware
from .error import ClientError, ServerError, error_body
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} on {request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    logger.warning(f"Validation error on {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", message),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_ERROR", "Internal server error"),
    )


def create_app(ApplicationConfig) -> FastAPI:
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database ready")
        yield
        await engine.dispose()

    app = FastAPI(title="User Management API", version="0.1.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import auth, health_check, users

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"])
    app.include_router(users.router, prefix=ApplicationConfig.API_PREFIX, tags=["Users"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
