"""
exceptions.py

서비스 계층에서 사용하는 애플리케이션 예외 정의.

- BusinessRuleError : 사용자가 입력을 고쳐서 해결할 수 있는 규칙 위반
                      (중복 이메일/아이디, 잘못된 권한 등)
- UserNotFoundError : 수정 대상 계정(또는 튜터 프로필)이 존재하지 않음

라우터는 BusinessRuleError → 400, UserNotFoundError → 404 로 변환한다.
조회 실패(로그인 실패, 없는 토큰 등)는 예외가 아니라 None / False 로 반환한다.

"""


class AppError(Exception):
    """애플리케이션 예외의 공통 부모"""


class BusinessRuleError(AppError, ValueError):
    """사용자에게 그대로 보여줄 수 있는 사유(message)를 가진 규칙 위반"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateAccountError(BusinessRuleError):
    """이미 사용 중인 이메일 / 아이디"""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class InvalidRoleError(BusinessRuleError):
    def __init__(self, role_id):
        self.role_id = role_id
        super().__init__(f"Invalid role: {role_id}")


class UserNotFoundError(AppError, LookupError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
