from pydantic import BaseModel, ConfigDict, StrictStr

class NotificationRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # empty strings are accepted; only absent or null fields are rejected
    chatId: StrictStr
    message: StrictStr

class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
    message: str
