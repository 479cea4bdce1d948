from pydantic import BaseModel, EmailStr


class LoginPayload(BaseModel):
    email: EmailStr
    password: str


class TokenPayload(BaseModel):
    """Identity carried inside every access and refresh token."""

    id: int
    email: str


class TokenPair(BaseModel):
    accessToken: str
    refreshToken: str


class AccessTokenOut(BaseModel):
    accessToken: str
