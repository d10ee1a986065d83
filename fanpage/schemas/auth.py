from pydantic import BaseModel
from fanpage.core.enums import AdminRole

class LoginRequest(BaseModel):
    password: str = ""

class LoginResponse(BaseModel):
    ok: bool = True
    role: AdminRole

class AuthStatusResponse(BaseModel):
    role: AdminRole
    is_admin: bool
