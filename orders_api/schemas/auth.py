# orders_api/schemas/auth.py

from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from orders_api.schemas.order import CAMEL_CONFIG

class SignIn(BaseModel):
    client_email: EmailStr
    client_password: str = Field(..., min_length=1)

    model_config = CAMEL_CONFIG

class TokenResponse(BaseModel):
    id: int
    status: str
    client_email: Optional[str] = None
    token: str

    model_config = CAMEL_CONFIG
