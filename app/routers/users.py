"""
users.py

로그인 사용자 본인 정보 API 모음.

이 파일은 로그인한 회원이
본인의 기본 프로필 정보를 조회하고,
TUTOR 회원이 본인의 튜터 프로필을 수정하기 위한 기능을 담당한다.

관리자용 사용자 관리 기능(admin.py)과 분리하여,
권한 범위와 노출 가능한 데이터 범위를 명확히 하기 위한 구조이다.

주요 기능:
- 본인 프로필 정보 조회
- 본인 튜터 프로필 수정 (과목 / 시급 / 소개 / 가능 시간)

설계 원칙:
- 로그인 사용자만 접근 가능
- Soft Delete(deleted_at != NULL)된 회원은 조회되지 않음

관련 파일:
- app.services.account     : 조회 / 튜터 프로필 수정
- app.core.deps            : 로그인 인증(get_current_session)
"""

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from app.core.deps import get_account_service, get_current_session
from app.core.exceptions import UserNotFoundError
from app.schemas.auth import UserSession
from app.schemas.tutor import TutorProfileResponse, TutorProfileUpdate
from app.schemas.user import UserResponse
from app.services.account import AccountService

router = APIRouter(prefix="/users", tags=["users"])

"""
회원 본인 프로필 조회 API

- 로그인한 회원 본인의 정보와 튜터 프로필(있다면) 반환

"""
@router.get("/profile")
def profile(
    session: UserSession = Depends(get_current_session),
    service: AccountService = Depends(get_account_service),
):
    user = service.get_user_by_id(session.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return {
        "data": {
            **UserResponse.model_validate(user).model_dump(mode="json"),
            "tutors": [
                TutorProfileResponse.model_validate(t).model_dump(mode="json")
                for t in user.tutors
                if t.deleted_at is None
            ],
        }
    }

"""
튜터 프로필 수정 API

- 입력한 항목만 변경 (None은 기존 값 유지)
- 활성 튜터 프로필이 없으면 404

"""
@router.patch("/profile/tutor")
def edit_tutor_profile(
    data: TutorProfileUpdate,
    session: UserSession = Depends(get_current_session),
    service: AccountService = Depends(get_account_service),
):
    try:
        tutor = service.update_tutor_profile(session.user_id, data)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tutor profile not found")

    return {"data": TutorProfileResponse.model_validate(tutor).model_dump(mode="json")}
