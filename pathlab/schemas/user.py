"""
Login/signup request and user response models
"""

from typing import Optional

from pydantic import Field

from pathlab.schemas.common import RequestModel, RequiredStr, ResponseModel


class LoginRequest(RequestModel):
    username: RequiredStr
    password: RequiredStr


class SignupRequest(RequestModel):
    username: RequiredStr
    fullName: Optional[str] = None
    password: RequiredStr = Field(..., min_length=4)
    role: Optional[str] = None
    contactNumber: Optional[str] = None
    securityQuestion: Optional[str] = None
    securityAnswer: Optional[str] = None


class UserOut(ResponseModel):
    user_id: int
    username: str
    full_name: Optional[str] = None
    role: Optional[str] = None


class UserProfile(UserOut):
    contact_number: Optional[str] = None


class LoginResponse(ResponseModel):
    success: bool = True
    user: UserOut
    message: str = "Login successful"


class UserResponse(ResponseModel):
    success: bool = True
    user: UserProfile
