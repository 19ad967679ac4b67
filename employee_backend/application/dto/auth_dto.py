from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """DTO for user signup request"""
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    """DTO for user login request"""
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    token: str


class MessageResponse(BaseModel):
    """DTO for plain acknowledgement responses"""
    message: str
