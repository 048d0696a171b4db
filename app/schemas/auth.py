from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    email: EmailStr
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=8, max_length=64)
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    role: str = "Student"
    skills: str | None = Field(default=None, max_length=255)

class RegisterResponse(BaseModel):
    id: int
    email: EmailStr
    username: str
    role_name: str

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

# 로그인한 사용자 식별 정보 (세션 토큰에 담기는 값)
class UserSession(BaseModel):
    user_id: int
    username: str = ""
    first_name: str = ""
    role_name: str = "Student"
    role_id: int = 0

class SessionTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserSession

class ForgotPasswordRequest(BaseModel):
    email: EmailStr

class ResetPasswordRequest(BaseModel):
    token: str
    new_password: str = Field(..., min_length=8, max_length=64)
    confirm_password: str = Field(..., min_length=8, max_length=64)
