"""Submission Service 테스트"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import (
    assignment as assignment_crud,
    completion as completion_crud,
    question as question_crud,
    user as user_crud,
    user_response as user_response_crud,
)
from app.exceptions import (
    AlreadyCompletedError,
    AssignmentNotCompletedError,
    AssignmentNotFoundError,
    QuestionNotFoundError,
    StoreError,
    UserNotFoundError,
)
from app.models.user_response import ResponseStatus
from app.schemas import submission as submission_schema
from app.services import submission_service


@pytest.fixture
def mock_db_session():
    """모킹된 DB 세션"""
    session = AsyncMock(spec=AsyncSession)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def mock_question():
    """모킹된 문제"""
    question = MagicMock()
    question.id = 1
    question.correct_answer = "A"
    question.short_content = "요약 해설"
    question.long_content_text = "상세 해설"
    question.long_content_file_path = "/uploads/1700000000000.pdf"
    return question


@pytest.fixture
def submit_request():
    return submission_schema.SubmitRequest(
        responses=[
            submission_schema.ResponseItem(question_id=1, answer="A", is_sure=True),
        ]
    )


@pytest.mark.parametrize(
    "is_correct, is_sure, expected",
    [
        (True, True, ResponseStatus.SURE_CORRECT),
        (True, False, ResponseStatus.NOT_SURE_CORRECT),
        (False, True, ResponseStatus.SURE_INCORRECT),
        (False, False, ResponseStatus.NOT_SURE_INCORRECT),
    ],
)
def test_classify_response(is_correct, is_sure, expected):
    """정답 여부와 확신 여부로 응답 상태 분류"""
    status = submission_service.classify_response(is_correct, is_sure)
    assert status == expected
    assert status.is_correct == is_correct
    assert status.is_sure == is_sure


def test_derive_feedback_sure_correct(mock_question):
    """확신하고 맞힌 경우 피드백 없음"""
    assert submission_service.derive_feedback(ResponseStatus.SURE_CORRECT, mock_question) is None


def test_derive_feedback_not_sure_correct(mock_question):
    """확신 없이 맞힌 경우 요약 해설만"""
    feedback = submission_service.derive_feedback(ResponseStatus.NOT_SURE_CORRECT, mock_question)
    assert feedback.short == "요약 해설"
    assert feedback.long is None


@pytest.mark.parametrize("status", [ResponseStatus.SURE_INCORRECT, ResponseStatus.NOT_SURE_INCORRECT])
def test_derive_feedback_incorrect(mock_question, status):
    """틀린 경우 상세 해설 (텍스트 + 파일)"""
    feedback = submission_service.derive_feedback(status, mock_question)
    assert feedback.short is None
    assert feedback.long.text == "상세 해설"
    assert feedback.long.file_path == "/uploads/1700000000000.pdf"


@pytest.mark.asyncio
async def test_submit_user_not_found(mock_db_session, submit_request):
    """사용자를 찾을 수 없을 때 예외 발생"""
    with patch.object(user_crud, "get_user_by_id", return_value=None):
        with pytest.raises(UserNotFoundError):
            await submission_service.submit_assignment(mock_db_session, 999, 1, submit_request)


@pytest.mark.asyncio
async def test_submit_assignment_not_found(mock_db_session, submit_request):
    """과제를 찾을 수 없을 때 예외 발생"""
    with patch.object(user_crud, "get_user_by_id", return_value=MagicMock()):
        with patch.object(assignment_crud, "get_assignment_by_id", return_value=None):
            with pytest.raises(AssignmentNotFoundError):
                await submission_service.submit_assignment(mock_db_session, 1, 999, submit_request)


@pytest.mark.asyncio
async def test_submit_already_completed_writes_nothing(mock_db_session, submit_request):
    """이미 완료한 과제는 응답을 기록하지 않고 거부"""
    completion = MagicMock()
    completion.is_completed = True

    with patch.object(user_crud, "get_user_by_id", return_value=MagicMock()), \
            patch.object(assignment_crud, "get_assignment_by_id", return_value=MagicMock()), \
            patch.object(completion_crud, "get_completion", return_value=completion), \
            patch.object(user_response_crud, "create_user_response") as create_response:
        with pytest.raises(AlreadyCompletedError):
            await submission_service.submit_assignment(mock_db_session, 1, 1, submit_request)

    create_response.assert_not_called()
    mock_db_session.commit.assert_not_called()


@pytest.mark.asyncio
async def test_submit_question_not_found_rolls_back(mock_db_session, mock_question):
    """존재하지 않는 문제가 섞여 있으면 전체 롤백"""
    request = submission_schema.SubmitRequest(
        responses=[
            submission_schema.ResponseItem(question_id=1, answer="A", is_sure=True),
            submission_schema.ResponseItem(question_id=999, answer="A", is_sure=True),
        ]
    )

    with patch.object(user_crud, "get_user_by_id", return_value=MagicMock()), \
            patch.object(assignment_crud, "get_assignment_by_id", return_value=MagicMock()), \
            patch.object(completion_crud, "get_completion", return_value=None), \
            patch.object(question_crud, "get_question_by_id", side_effect=[mock_question, None]), \
            patch.object(user_response_crud, "create_user_response") as create_response, \
            patch.object(completion_crud, "mark_completed") as mark_completed:
        with pytest.raises(QuestionNotFoundError):
            await submission_service.submit_assignment(mock_db_session, 1, 1, request)

    assert create_response.await_count == 1
    mark_completed.assert_not_called()
    mock_db_session.rollback.assert_awaited_once()
    mock_db_session.commit.assert_not_called()


@pytest.mark.asyncio
async def test_submit_lost_completion_race(mock_db_session, mock_question, submit_request):
    """동시 제출에서 완료 처리가 0행이면 거부하고 롤백"""
    with patch.object(user_crud, "get_user_by_id", return_value=MagicMock()), \
            patch.object(assignment_crud, "get_assignment_by_id", return_value=MagicMock()), \
            patch.object(completion_crud, "get_completion", return_value=None), \
            patch.object(question_crud, "get_question_by_id", return_value=mock_question), \
            patch.object(user_response_crud, "create_user_response"), \
            patch.object(completion_crud, "mark_completed", return_value=False):
        with pytest.raises(AlreadyCompletedError):
            await submission_service.submit_assignment(mock_db_session, 1, 1, submit_request)

    mock_db_session.rollback.assert_awaited_once()
    mock_db_session.commit.assert_not_called()


@pytest.mark.asyncio
async def test_submit_database_error_becomes_store_error(mock_db_session, mock_question, submit_request):
    """DB 오류는 StoreError로 변환되고 롤백"""
    db_error = OperationalError("INSERT INTO user_responses", {}, Exception("disk I/O error"))

    with patch.object(user_crud, "get_user_by_id", return_value=MagicMock()), \
            patch.object(assignment_crud, "get_assignment_by_id", return_value=MagicMock()), \
            patch.object(completion_crud, "get_completion", return_value=None), \
            patch.object(question_crud, "get_question_by_id", return_value=mock_question), \
            patch.object(user_response_crud, "create_user_response", side_effect=db_error):
        with pytest.raises(StoreError):
            await submission_service.submit_assignment(mock_db_session, 1, 1, submit_request)

    mock_db_session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_submit_success(mock_db_session, mock_question):
    """제출 성공 시 문항별 결과와 완료 여부 반환"""
    request = submission_schema.SubmitRequest(
        responses=[
            submission_schema.ResponseItem(question_id=1, answer="B", is_sure=False),
        ]
    )

    with patch.object(user_crud, "get_user_by_id", return_value=MagicMock()), \
            patch.object(assignment_crud, "get_assignment_by_id", return_value=MagicMock()), \
            patch.object(completion_crud, "get_completion", return_value=None), \
            patch.object(question_crud, "get_question_by_id", return_value=mock_question), \
            patch.object(user_response_crud, "create_user_response") as create_response, \
            patch.object(completion_crud, "mark_completed", return_value=True):
        response = await submission_service.submit_assignment(mock_db_session, 1, 1, request)

    assert response.assignment_completed is True
    assert len(response.results) == 1
    result = response.results[0]
    assert result.status == ResponseStatus.NOT_SURE_INCORRECT
    assert result.correct_answer == "A"
    assert result.user_answer == "B"
    assert result.feedback.long.text == "상세 해설"
    assert create_response.await_args.kwargs["status"] == ResponseStatus.NOT_SURE_INCORRECT
    mock_db_session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_results_before_completion(mock_db_session):
    """완료하지 않은 과제의 결과 조회는 실패"""
    with patch.object(completion_crud, "get_completion", return_value=None):
        with pytest.raises(AssignmentNotCompletedError):
            await submission_service.get_assignment_results(mock_db_session, 1, 1)
