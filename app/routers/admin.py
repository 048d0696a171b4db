from fastapi import APIRouter, Depends, HTTPException

from sqlalchemy.exc import IntegrityError

from app.core.deps import get_admin_service, get_current_admin
from app.models.user import Role, User
from app.schemas.auth import UserSession
from app.schemas.tutor import TutorProfileResponse
from app.schemas.user import AdminCreateRequest, UserResponse, UserUpdate
from app.services.admin import AdminService


router = APIRouter(prefix="/admin", tags=["admin"])


def resolve_role_id(data: AdminCreateRequest) -> int:
    if data.role_id is not None:
        return data.role_id
    return Role.from_name(data.role, allow_admin=True).value


def _user_payload(user: User, *, with_tutors: bool = False) -> dict:
    payload = UserResponse.model_validate(user).model_dump(mode="json")
    if with_tutors:
        payload["tutors"] = [
            TutorProfileResponse.model_validate(t).model_dump(mode="json")
            for t in user.tutors
            if t.deleted_at is None
        ]
    return payload


# 대시보드 통계 엔드포인트
@router.get("/stats")
def stats(
    service: AdminService = Depends(get_admin_service),
    _: UserSession = Depends(get_current_admin),
):
    return {"data": service.get_stats().model_dump()}


# 전체 회원 목록 조회 엔드포인트 (탈퇴 회원 제외)
@router.get("/users")
def list_users(
    service: AdminService = Depends(get_admin_service),
    _: UserSession = Depends(get_current_admin),
):
    users = service.list_users()
    return {
        "data": [_user_payload(u, with_tutors=True) for u in users],
        "meta": {
            "count": len(users),
        },
    }


# 회원 상세 조회 엔드포인트
@router.get("/users/{user_id}")
def get_user(
    user_id: int,
    service: AdminService = Depends(get_admin_service),
    _: UserSession = Depends(get_current_admin),
):
    user = service.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return {"data": _user_payload(user, with_tutors=True)}


# 관리자 회원 생성 엔드포인트
@router.post("/users")
def create_user(
    data: AdminCreateRequest,
    service: AdminService = Depends(get_admin_service),
    _: UserSession = Depends(get_current_admin),
):
    # 권한 오류 / 중복은 BusinessRuleError로 올라가 400 처리됨 (app.main)
    try:
        user = service.admin_create(data, resolve_role_id(data))
    except IntegrityError:
        service.db.rollback()
        raise HTTPException(status_code=400, detail="Email or username already registered")

    return {
        "message": f"User {user.username} created successfully!",
        "data": _user_payload(user),
    }


# 회원 정보 수정 엔드포인트
@router.put("/users/{user_id}")
def update_user(
    user_id: int,
    data: UserUpdate,
    service: AdminService = Depends(get_admin_service),
    _: UserSession = Depends(get_current_admin),
):
    # 없는 회원 404, 권한 / 중복 오류 400 (app.main 예외 핸들러)
    user = service.update_profile(user_id, data)

    return {
        "message": "User updated successfully!",
        "data": _user_payload(user),
    }


# 회원 삭제 엔드포인트 (Soft Delete, 튜터 프로필 포함)
@router.delete("/users/{user_id}")
def delete_user(
    user_id: int,
    service: AdminService = Depends(get_admin_service),
    current_admin: UserSession = Depends(get_current_admin),
):
    # 자기 자신 삭제 금지
    if user_id == current_admin.user_id:
        raise HTTPException(status_code=400, detail="Cannot delete yourself")

    service.soft_delete(user_id)
    return {
        "message": "User deleted",
        "data": {
            "id": user_id,
        },
    }
