import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from roombooker.config import Settings
from roombooker.db import init_database, make_engine, make_session_factory
from roombooker.errors import RoomBookingError
from roombooker.routers import rooms, bookings
from roombooker.utils.locks import SlotLocks

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper())


def error_response(status_code: int, message: str, code: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"message": message, "code": code, **extra}),
    )


async def room_booking_error_handler(_: Request, exc: RoomBookingError):
    return error_response(exc.status_code, exc.message, exc.code)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        "INVALID_REQUEST",
        errors=exc.errors(),
    )


async def server_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error", "SERVER_ERROR"
    )


def create_app(settings: Settings) -> FastAPI:
    configure_logging(settings)
    engine = make_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        "lifespan for initing database"
        init_database(engine)
        yield
        engine.dispose()

    app = FastAPI(
        lifespan=lifespan,
        title="Room booker",
        description="Meeting room booking API with business-hour and capacity rules.",
        version="0.1.0",
        license_info={
            "name": "MIT",
            "url": "https://opensource.org/licenses/MIT",
        },
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.slot_locks = SlotLocks()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RoomBookingError, room_booking_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, server_error_handler)
    app.add_exception_handler(Exception, server_error_handler)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def root():
        return "API is running..."

    app.include_router(rooms.router, prefix=settings.api_prefix)
    app.include_router(bookings.router, prefix=settings.api_prefix)

    logger.info(f"Room booker configured, database: {engine.url.render_as_string(hide_password=True)}")
    return app
