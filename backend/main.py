import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routers import notification
from services.notification_service import NotificationService
from utils_others.config import Settings, configure_logging, load_settings
from utils_others.error_handler import register_exception_handlers

logger = logging.getLogger(__name__)

def create_app(
    settings: Optional[Settings] = None,
    notification_service: Optional[NotificationService] = None,
) -> FastAPI:
    """Build the notification ingress app. Pass a service to redirect where submissions are recorded."""
    settings = settings or load_settings()

    app = FastAPI(
        title="Notification API",
        description="Ingress endpoint for chat notifications",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.notification_service = notification_service or NotificationService(
        logging.getLogger(settings.logger_name)
    )

    register_exception_handlers(app)
    app.include_router(notification.router, prefix="/api/notification")

    logger.info("CORS enabled for origins: %s", settings.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "User-Agent"],
    )
    return app

_settings = load_settings()
configure_logging(_settings.log_level)
app = create_app(_settings)

if __name__ == "__main__":
    uvicorn.run(app, host=_settings.host, port=_settings.port)
