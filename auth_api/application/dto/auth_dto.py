from typing import Optional

from pydantic import BaseModel


class SignupRequest(BaseModel):
    """DTO for signup request (presence of email is checked by the use case)"""
    email: Optional[str] = None
    password: str


class SigninResponse(BaseModel):
    """DTO for the signin acknowledgement"""
    msg: str


class ErrorResponse(BaseModel):
    """DTO for error bodies"""
    detail: str
