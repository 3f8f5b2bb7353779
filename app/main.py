# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging
import logging.config
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.appconfig import AppSettings, settings as default_settings

# Apply logging configuration
logging.config.dictConfig(default_settings.LOGGING_CONFIG)

from app.database.connection import Database
from app.shared.error_handlers import register_exception_handlers
from app.system_services.system_routes import router as system_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or default_settings
    database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        database.connect()
        if settings.DB_CREATE_TABLES:
            await database.create_all()
        logger.info("===============================================================================")
        logger.info(f" 🚀 Starting {settings.APP_NAME}")
        logger.info(f" ✅ Database: {database.engine.url.render_as_string(hide_password=True)}")
        if not settings.is_sqlite:
            logger.info(f" ✅ Pool: size={settings.DB_POOL_SIZE} overflow={settings.DB_MAX_OVERFLOW} timeout={settings.DB_POOL_TIMEOUT}s")
        timeout_label = "Lock wait timeout" if settings.is_sqlite else "Statement timeout"
        logger.info(f" ✅ {timeout_label}: {settings.DB_COMMAND_TIMEOUT}s")
        logger.info(f" ✅ Appointment conflict check: {'on' if settings.APPOINTMENT_CONFLICT_CHECK else 'off'}")
        logger.info("===============================================================================")
        yield
        # Shutdown
        await database.dispose()
        logger.info("👋 Shutting down")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Patients, doctors, appointments and medical records",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(system_router, prefix="/api")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=5000, reload=True)
