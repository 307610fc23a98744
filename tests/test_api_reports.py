"""진행률/이력/숙달 리포트 API 통합 테스트"""
import pytest
import pytest_asyncio


@pytest_asyncio.fixture
async def submitted(client, assignment, regular_user, question_bank):
    """sure_correct, not_sure_correct, sure_incorrect 각 1건 제출"""
    stats_q1, stats_q2, _ = question_bank["statistics_questions"]
    sql_q1 = question_bank["sql_questions"][0]
    response = await client.post(
        f"/api/v1/user/{regular_user.id}/assignments/{assignment}/submit",
        json={
            "responses": [
                {"questionId": stats_q1.id, "answer": "A", "isSure": True},
                {"questionId": stats_q2.id, "answer": "A", "isSure": False},
                {"questionId": sql_q1.id, "answer": "A", "isSure": True},
            ]
        },
    )
    assert response.status_code == 200
    return assignment


@pytest.mark.asyncio
async def test_user_progress(client, regular_user, submitted):
    """전체/카테고리별 진행률과 최근 활동"""
    response = await client.get(f"/api/v1/user/{regular_user.id}/progress")

    assert response.status_code == 200
    progress = response.json()["progress"]

    overall = progress["overallStats"]
    assert overall["totalResponses"] == 3
    assert overall["totalAssignments"] == 1
    assert overall["totalCategories"] == 2
    assert overall["correctAnswers"] == 2
    assert overall["confidentResponses"] == 2
    assert overall["masteredQuestions"] == 1
    assert overall["accuracy"] == 67
    assert overall["confidence"] == 67
    assert overall["mastery"] == 33

    categories = {c["categoryName"]: c for c in progress["categories"]}
    assert categories["통계"]["totalQuestions"] == 3
    assert categories["통계"]["attemptedQuestions"] == 2
    assert categories["통계"]["completionPercentage"] == 67
    assert categories["통계"]["accuracy"] == 100
    assert categories["SQL"]["attemptedQuestions"] == 1
    assert categories["SQL"]["completionPercentage"] == 50
    assert categories["SQL"]["accuracy"] == 0

    recent = progress["recentActivity"]
    assert len(recent) == 3
    assert {r["status"] for r in recent} == {"sure_correct", "not_sure_correct", "sure_incorrect"}
    incorrect = next(r for r in recent if r["status"] == "sure_incorrect")
    assert incorrect["isCorrect"] is False
    assert incorrect["category"] == "SQL"


@pytest.mark.asyncio
async def test_user_progress_without_responses(client, regular_user, question_bank):
    """응답이 없으면 모든 비율 0, 카테고리는 문제 수와 함께 표시"""
    response = await client.get(f"/api/v1/user/{regular_user.id}/progress")

    assert response.status_code == 200
    progress = response.json()["progress"]
    assert progress["overallStats"]["totalResponses"] == 0
    assert progress["overallStats"]["accuracy"] == 0
    assert progress["recentActivity"] == []
    assert all(c["completionPercentage"] == 0 for c in progress["categories"])
    assert len(progress["categories"]) == 2


@pytest.mark.asyncio
async def test_user_progress_unknown_user(client):
    response = await client.get("/api/v1/user/999/progress")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_completion_details(client, regular_user, submitted):
    """과제별 완료 여부와 숙달률"""
    response = await client.get(f"/api/v1/user/{regular_user.id}/assignments/completion-details")

    assert response.status_code == 200
    assignments = response.json()["assignments"]
    assert len(assignments) == 1
    detail = assignments[0]
    assert detail["id"] == submitted
    assert detail["isCompleted"] is True
    assert detail["completedAt"] is not None
    assert detail["stats"] == {
        "totalCategories": 2,
        "totalQuestions": 3,
        "masteredQuestions": 1,
        "masteryPercentage": 33,
    }


@pytest.mark.asyncio
async def test_completion_details_not_started(client, regular_user, assignment):
    response = await client.get(f"/api/v1/user/{regular_user.id}/assignments/completion-details")

    detail = response.json()["assignments"][0]
    assert detail["isCompleted"] is False
    assert detail["completedAt"] is None
    assert detail["stats"]["masteryPercentage"] == 0


@pytest.mark.asyncio
async def test_user_history(client, regular_user, submitted):
    """관리자용 사용자 응시 이력"""
    response = await client.get(f"/api/v1/admin/users/{regular_user.id}/history")

    assert response.status_code == 200
    data = response.json()
    assert data["userId"] == regular_user.id
    assert len(data["assignments"]) == 1

    history = data["assignments"][0]
    assert history["id"] == submitted
    assert history["isCompleted"] is True
    assert history["stats"]["totalResponses"] == 3
    assert history["stats"]["sureCorrect"] == 1
    assert history["stats"]["notSureCorrect"] == 1
    assert history["stats"]["sureIncorrect"] == 1
    assert {c["categoryName"]: c["totalResponses"] for c in history["categories"]} == {"통계": 2, "SQL": 1}

    assert data["overallStats"]["totalAssignments"] == 1
    assert data["overallStats"]["mastery"] == 33


@pytest.mark.asyncio
async def test_user_history_unknown_user(client):
    response = await client.get("/api/v1/admin/users/999/history")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_question_mastery(client, regular_user, question_bank, submitted):
    """문제별 숙달 여부와 상태별 응답 횟수"""
    mastered_question = question_bank["statistics_questions"][0]
    missed_question = question_bank["sql_questions"][0]

    response = await client.get(
        f"/api/v1/admin/users/{regular_user.id}/questions/{mastered_question.id}/mastery"
    )

    assert response.status_code == 200
    data = response.json()
    assert data["mastered"] is True
    assert data["mastery"] == [{"status": "sure_correct", "attemptCount": 1}]

    response = await client.get(
        f"/api/v1/admin/users/{regular_user.id}/questions/{missed_question.id}/mastery"
    )

    data = response.json()
    assert data["mastered"] is False
    assert data["mastery"] == [{"status": "sure_incorrect", "attemptCount": 1}]


@pytest.mark.asyncio
async def test_question_mastery_unknown_question(client, regular_user):
    response = await client.get(f"/api/v1/admin/users/{regular_user.id}/questions/999/mastery")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_all_regular_users(client, admin_user, regular_user, submitted):
    """관리자를 제외한 사용자 목록과 활동량"""
    response = await client.get("/api/v1/admin/getAllRegularUsers")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    user = data["users"][0]
    assert user["id"] == regular_user.id
    assert user["email"] == "user@example.com"
    assert user["totalQuestionsAttempted"] == 3
    assert user["totalAssignmentsAttempted"] == 1


@pytest.mark.asyncio
async def test_repeated_sure_correct_counts_each_response(client, regular_user, admin_user, question_bank):
    """같은 문제를 여러 번 확신+정답하면 응답 수만큼 숙달로 집계"""
    statistics_id = question_bank["statistics"].id
    target = question_bank["statistics_questions"][0]

    assignment_ids = []
    for name in ("복습 1", "복습 2", "복습 3"):
        response = await client.post(
            "/api/v1/admin/assignments",
            json={"adminId": admin_user.id, "name": name, "categoryQuestions": {str(statistics_id): 1}},
        )
        assignment_ids.append(response.json()["assignmentId"])

    answers = [("D", True), ("A", True), ("A", True)]
    for assignment_id, (answer, is_sure) in zip(assignment_ids, answers):
        response = await client.post(
            f"/api/v1/user/{regular_user.id}/assignments/{assignment_id}/submit",
            json={"responses": [{"questionId": target.id, "answer": answer, "isSure": is_sure}]},
        )
        assert response.status_code == 200

    response = await client.get(f"/api/v1/user/{regular_user.id}/progress")

    overall = response.json()["progress"]["overallStats"]
    assert overall["totalResponses"] == 3
    assert overall["masteredQuestions"] == 2
    assert overall["mastery"] == 67

    response = await client.get(
        f"/api/v1/admin/users/{regular_user.id}/questions/{target.id}/mastery"
    )
    counts = {m["status"]: m["attemptCount"] for m in response.json()["mastery"]}
    assert counts == {"sure_correct": 2, "sure_incorrect": 1}
