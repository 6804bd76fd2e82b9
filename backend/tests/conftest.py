import logging
import os
import uuid
from typing import List

import pytest
from fastapi.testclient import TestClient
from main import create_app
from services.notification_service import NotificationService
from utils_others.config import Settings

class CaptureHandler(logging.Handler):
    """Keeps formatted messages in memory instead of writing them out."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())

@pytest.fixture(scope="session")
def base_url() -> str:
    url = os.getenv("NOTIFICATION_BASE_URL")
    if not url:
        pytest.skip("NOTIFICATION_BASE_URL not set; skipping live API tests")
    return url.rstrip("/")

@pytest.fixture
def captured():
    logger = logging.getLogger(f"notification.test.{uuid.uuid4().hex}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = CaptureHandler()
    logger.addHandler(handler)
    yield logger, handler
    logger.removeHandler(handler)

@pytest.fixture
def records(captured) -> List[str]:
    return captured[1].messages

@pytest.fixture
def client(captured):
    app = create_app(Settings(), NotificationService(captured[0]))
    with TestClient(app) as c:
        yield c
