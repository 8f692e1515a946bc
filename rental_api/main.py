# rental_api/main.py
import asyncio
import os
import signal
import threading
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from rental_api.routes import vehicle_router, reservation_router, upload_router, files_router, health_router
from rental_api.database import db, connect_to_mongo, close_mongo_connection, init_db
from rental_api.dependencies import get_file_store
from rental_api.errors import register_exception_handlers
from rental_api.logger import LOGGING_CONFIG, configure_logging, get_logger
from rental_api.config import get_settings

settings = get_settings()
logger = get_logger("app")


def _terminate():
    # uvicorn closes the listening socket on SIGTERM before exiting
    os.kill(os.getpid(), signal.SIGTERM)


def _handle_loop_exception(loop, context):
    exc = context.get("exception")
    if exc is None:
        loop.default_exception_handler(context)
        return
    logger.critical(f"Unhandled asynchronous error: {context.get('message')}", exc_info=exc)
    _terminate()


def _handle_thread_exception(args):
    logger.critical(
        f"Uncaught exception in thread {args.thread.name if args.thread else '?'}",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )
    _terminate()


def install_crash_handlers():
    asyncio.get_running_loop().set_exception_handler(_handle_loop_exception)
    threading.excepthook = _handle_thread_exception


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    install_crash_handlers()
    get_file_store().ensure_directory()
    try:
        await connect_to_mongo()
    except Exception as e:
        logger.critical(f"MongoDB connection error: {e}")
        raise
    await init_db(db.db)
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(title="Vehicle Rental API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=["Content-Range", "X-Content-Range"],
    max_age=86400,
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)

register_exception_handlers(app)

app.include_router(upload_router, prefix=settings.API_PREFIX, tags=["uploads"])
app.include_router(vehicle_router, prefix=settings.API_PREFIX, tags=["vehicles"])
app.include_router(reservation_router, prefix=settings.API_PREFIX, tags=["reservations"])
app.include_router(files_router, tags=["uploads"])
app.include_router(health_router, tags=["health"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "rental_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_config=LOGGING_CONFIG,
    )
