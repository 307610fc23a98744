"""공통 테스트 픽스처 (in-memory SQLite + httpx AsyncClient)"""
import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.security import hash_password
from app.main import app
from app.models import Base, Category, Question, User, get_db

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def test_engine():
    """테스트마다 새로 만드는 in-memory DB 엔진"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db_session(test_session_factory):
    """테스트 데이터 준비/검증용 세션"""
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_session_factory):
    """get_db를 테스트 DB로 교체한 API 클라이언트"""

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    """업로드 파일은 테스트 임시 디렉터리에 저장"""
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(path))
    return path


@pytest_asyncio.fixture
async def admin_user(test_db_session):
    user = User(email="admin@example.com", password_hash=hash_password("admin-pass"), is_admin=True)
    test_db_session.add(user)
    await test_db_session.commit()
    return user


@pytest_asyncio.fixture
async def regular_user(test_db_session):
    user = User(email="user@example.com", password_hash=hash_password("user-pass"), is_admin=False)
    test_db_session.add(user)
    await test_db_session.commit()
    return user


def make_question(category_id: int, number: int, correct_answer: str = "A") -> Question:
    return Question(
        category_id=category_id,
        question=f"문제 {number}",
        options=json.dumps(["A", "B", "C", "D"]),
        correct_answer=correct_answer,
        short_content=f"요약 해설 {number}",
        long_content_text=f"상세 해설 {number}",
    )


@pytest_asyncio.fixture
async def question_bank(test_db_session):
    """카테고리 2개 (통계 3문제, SQL 2문제)"""
    statistics = Category(name="통계")
    sql = Category(name="SQL")
    test_db_session.add_all([statistics, sql])
    await test_db_session.flush()

    statistics_questions = [make_question(statistics.id, n) for n in range(1, 4)]
    sql_questions = [make_question(sql.id, n, correct_answer="B") for n in range(4, 6)]
    test_db_session.add_all(statistics_questions + sql_questions)
    await test_db_session.commit()

    return {
        "statistics": statistics,
        "sql": sql,
        "statistics_questions": statistics_questions,
        "sql_questions": sql_questions,
    }


@pytest_asyncio.fixture
async def assignment(client, question_bank, admin_user):
    """통계 2문항 + SQL 1문항 과제 (API로 생성)"""
    response = await client.post(
        "/api/v1/admin/assignments",
        json={
            "adminId": admin_user.id,
            "name": "1주차 과제",
            "categoryQuestions": {
                str(question_bank["statistics"].id): 2,
                str(question_bank["sql"].id): 1,
            },
        },
    )
    assert response.status_code == 201
    return response.json()["assignmentId"]


@pytest.fixture
def question_factory():
    return make_question
