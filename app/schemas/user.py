from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.schemas.auth import RegisterRequest


# 🔹 관리자 회원 생성 요청
# role_id를 주면 그대로 사용, 없으면 role 이름(Admin / Tutor / Student)으로 결정
class AdminCreateRequest(RegisterRequest):
    role_id: int | None = None


# 🔹 관리자 회원 정보 수정 요청
class UserUpdate(BaseModel):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    username: str = Field(min_length=1, max_length=50)
    role_id: int


# 🔹 유저 응답용 (필요한 필드만)
class UserResponse(BaseModel):
    id: int
    email: str
    username: str
    first_name: str
    last_name: str
    role_id: int
    role_name: str
    created_at: datetime
    deleted_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class AdminStatsResponse(BaseModel):
    total_users: int
    total_tutors: int
    total_students: int
