from fastapi import APIRouter, Depends, Request
from models.notification_models import ErrorResponse, NotificationRequest
from services.notification_service import NotificationService
from utils_others.error_handler import RecordingError

router = APIRouter(tags=["notification"])

SUCCESS = "Success"

def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service

@router.post(
    "",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def send_notification(
    notification: NotificationRequest,
    service: NotificationService = Depends(get_notification_service),
):
    try:
        service.record(notification)
    except Exception as e:
        raise RecordingError(f"Failed to record notification: {e}") from e

    return SUCCESS
