# backend/schemas/auth.py
from pydantic import BaseModel
from typing import Optional

class TokenPayload(BaseModel):
    userId: str
    email: Optional[str] = None
    iat: Optional[int] = None
    exp: int

class TokenTestResponse(BaseModel):
    message: str
    token: str
    decoded: Optional[TokenPayload] = None
