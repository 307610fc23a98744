"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(BaseAppError):
    """리소스를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class CategoryNotFoundError(NotFoundError):
    """카테고리를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"카테고리를 찾을 수 없습니다: {category_id}")


class QuestionNotFoundError(NotFoundError):
    """문제를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"문제를 찾을 수 없습니다: {question_id}")


class AssignmentNotFoundError(NotFoundError):
    """과제를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, assignment_id: int):
        self.assignment_id = assignment_id
        super().__init__(f"과제를 찾을 수 없습니다: {assignment_id}")


class UserNotFoundError(NotFoundError):
    """사용자를 찾을 수 없을 때 발생하는 예외 (404)"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"사용자를 찾을 수 없습니다: {user_id}")


class AssignmentNotCompletedError(NotFoundError):
    """완료되지 않은 과제의 결과를 조회할 때 발생하는 예외 (404)"""

    def __init__(self, user_id: int, assignment_id: int):
        super().__init__(f"사용자({user_id})가 완료하지 않은 과제입니다: {assignment_id}")


class AlreadyCompletedError(BaseAppError):
    """이미 완료한 과제에 다시 제출할 때 발생하는 예외 (409)"""

    def __init__(self, user_id: int, assignment_id: int):
        self.user_id = user_id
        self.assignment_id = assignment_id
        super().__init__(f"이미 완료한 과제입니다: user_id={user_id}, assignment_id={assignment_id}", status_code=409)


class InvalidRequestError(BaseAppError):
    """잘못된 요청일 때 발생하는 예외 (400)"""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class InvalidCredentialsError(BaseAppError):
    """로그인 정보가 올바르지 않을 때 발생하는 예외 (401)"""

    def __init__(self, message: str = "이메일 또는 비밀번호가 올바르지 않습니다"):
        super().__init__(message, status_code=401)


class EmailAlreadyRegisteredError(BaseAppError):
    """이미 가입된 이메일일 때 발생하는 예외 (409)"""

    def __init__(self, email: str):
        super().__init__(f"이미 가입된 이메일입니다: {email}", status_code=409)


class StoreError(BaseAppError):
    """트랜잭션/제약 조건 실패 (500)"""

    def __init__(self, message: str = "데이터 저장 중 오류가 발생했습니다"):
        super().__init__(message, status_code=500)
