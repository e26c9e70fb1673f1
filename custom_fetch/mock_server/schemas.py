from typing import Optional

from pydantic import BaseModel, Field


class PostsInput(BaseModel):
    """JSON body accepted by ``POST /posts``."""

    name: str = Field(min_length=1)
    content: Optional[str] = Field(default=None)


class MessageResponse(BaseModel):
    message: str


class UploadResponse(BaseModel):
    name: str
    size: int
    type: str


class SignResponse(BaseModel):
    token: str
    sub: str
    role: str
    exp: int
