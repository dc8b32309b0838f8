"""
Account Pydantic schemas for request/response validation
"""
from pydantic import BaseModel
from typing import Optional


class SignupRequest(BaseModel):
    """Schema for signup. Fields are optional here; the service reports the first missing one."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    companyname: Optional[str] = None


class SigninRequest(BaseModel):
    """Schema for signin"""
    email: Optional[str] = None
    password: Optional[str] = None


class AccountResponse(BaseModel):
    """Account as returned after signup (no password hash)"""
    id: int
    name: str
    email: str
    companyname: str

    class Config:
        from_attributes = True


class SigninUser(BaseModel):
    id: int
    email: str
    companyname: str


class SignupResponse(BaseModel):
    message: str
    user: AccountResponse
    access_token: str


class SigninResponse(BaseModel):
    message: str
    token: str
    user: SigninUser
