from typing import Any

from pydantic import BaseModel


class MessageOut(BaseModel):
    message: str


class SuccessEnvelope(BaseModel):
    statusCode: int
    message: str
    data: Any = None
    meta: Any = None


class ErrorEnvelope(BaseModel):
    statusCode: int
    message: str
    error: str
    data: None = None
