import json

import pytest
from fastapi.testclient import TestClient

from api import shared
from api.main import app


@pytest.fixture
def client(monkeypatch, tmp_path):
    monkeypatch.setattr(shared, "QUESTIONS_FILE", str(tmp_path / "missing.json"))
    shared.clear_cache()
    with TestClient(app) as test_client:
        yield test_client
    shared.clear_cache()


@pytest.fixture
def registered(client, numeric_payload):
    response = client.post("/api/questions", json=numeric_payload)
    assert response.status_code == 201
    return numeric_payload


def test_root_and_health(client):
    assert client.get("/").json()["docs"] == "/docs"
    assert client.get("/health").json() == {"status": "healthy"}


class TestValidateEndpoint:
    def test_numeric_within_tolerance(self, client, numeric_payload):
        response = client.post("/api/validation/validate",
                               json={"question": numeric_payload, "submittedAnswer": "4.00"})

        assert response.status_code == 200
        body = response.json()
        assert body["isCorrect"] is True
        assert body["scoreAwarded"] == 10
        assert body["scoreMax"] == 10
        assert body["feedbackShown"] == "Correct!"

    def test_multiple_choice_wrong_index(self, client):
        question = {
            "type": "multiple_choice",
            "correctAnswer": [0],
            "config": {"options": ["2", "4", "6", "8"]},
            "points": 8,
            "feedback": {"onCorrect": "Yes", "onIncorrect": "No"},
        }

        body = client.post("/api/validation/validate",
                           json={"question": question, "submittedAnswer": 1}).json()

        assert body["isCorrect"] is False
        assert body["scoreAwarded"] == 0
        assert body["feedbackShown"] == "No"

    def test_null_answer_is_incorrect(self, client, numeric_payload):
        body = client.post("/api/validation/validate",
                           json={"question": numeric_payload, "submittedAnswer": None}).json()

        assert body["isCorrect"] is False

    def test_negative_tolerance_is_rejected(self, client, numeric_payload):
        numeric_payload["config"]["tolerance"] = -0.5

        response = client.post("/api/validation/validate",
                               json={"question": numeric_payload, "submittedAnswer": 4})

        assert response.status_code == 400

    def test_huge_integer_answer_key_is_rejected(self, client, numeric_payload):
        numeric_payload["correctAnswer"] = 10 ** 400

        response = client.post("/api/validation/validate",
                               json={"question": numeric_payload, "submittedAnswer": 4})

        assert response.status_code == 400

    def test_unknown_type_is_unprocessable(self, client, numeric_payload):
        numeric_payload["type"] = "essay"

        response = client.post("/api/validation/validate",
                               json={"question": numeric_payload, "submittedAnswer": 4})

        assert response.status_code == 422


class TestQuestionEndpoints:
    def test_create_and_get(self, client, registered):
        body = client.get("/api/questions/q-num").json()

        assert body["questionId"] == "q-num"
        assert body["type"] == "numeric"
        assert "correctAnswer" not in body

    def test_duplicate_id(self, client, registered):
        assert client.post("/api/questions", json=registered).status_code == 409

    def test_missing_question(self, client):
        assert client.get("/api/questions/nope").status_code == 404

    def test_question_id_required(self, client, numeric_payload):
        del numeric_payload["questionId"]

        assert client.post("/api/questions", json=numeric_payload).status_code == 422

    def test_answer_shape_mismatch(self, client, numeric_payload):
        numeric_payload["correctAnswer"] = "four"

        assert client.post("/api/questions", json=numeric_payload).status_code == 400

    def test_huge_integer_answer_key_on_create(self, client, numeric_payload):
        numeric_payload["correctAnswer"] = 10 ** 400

        assert client.post("/api/questions", json=numeric_payload).status_code == 400

    def test_multiple_choice_without_options(self, client):
        response = client.post("/api/questions", json={
            "questionId": "q-mc",
            "type": "multiple_choice",
            "correctAnswer": -3,
            "points": 1,
            "feedback": {"onCorrect": "Yes", "onIncorrect": "No"},
        })

        assert response.status_code == 400

    def test_list_questions(self, client, registered):
        body = client.get("/api/questions").json()

        assert body["totalQuestions"] == 1
        assert [q["questionId"] for q in body["questions"]] == ["q-num"]

    def test_list_questions_empty(self, client):
        assert client.get("/api/questions").json() == {"questions": [], "totalQuestions": 0}

    def test_seeded_from_file(self, monkeypatch, tmp_path, numeric_payload):
        seed = tmp_path / "seed.json"
        seed.write_text(json.dumps([numeric_payload]), encoding="utf-8")
        monkeypatch.setattr(shared, "QUESTIONS_FILE", str(seed))
        shared.clear_cache()

        with TestClient(app) as seeded_client:
            assert seeded_client.get("/api/questions/q-num").status_code == 200
        shared.clear_cache()


class TestAttemptEndpoints:
    def _submit(self, client, answer, attempt_id="att-1", question_id="q-num"):
        return client.post(f"/api/attempts/{attempt_id}/responses", json={
            "questionId": question_id,
            "studentId": "stu-1",
            "submittedAnswer": answer,
            "timeSpent": 30,
        })

    def test_submit_grades_and_attaches_hint(self, client, registered):
        response = self._submit(client, "4.00")

        assert response.status_code == 201
        body = response.json()
        assert body["response"]["validation"]["isCorrect"] is True
        assert body["response"]["validation"]["scoreAwarded"] == 10
        assert body["response"]["submittedAnswer"] == "4.00"
        assert body["explanation"] == "f'(2) = 4"
        assert body["hint"] == "Evaluate the derivative at 2."

    def test_duplicate_submission(self, client, registered):
        self._submit(client, "3")

        assert self._submit(client, "4").status_code == 409

    def test_null_answer_is_bad_request(self, client, registered):
        assert self._submit(client, None).status_code == 400

    def test_unknown_question(self, client):
        assert self._submit(client, 1, question_id="ghost").status_code == 404

    def test_misconfigured_question_is_internal_error(self, client, registered):
        question = shared.get_question_repository().get("q-num")
        object.__setattr__(question, "tolerance", -1)

        response = self._submit(client, "4")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal grading error"

    def test_responses_and_score(self, client, registered):
        client.post("/api/questions", json={
            "questionId": "q-tf",
            "type": "true_false",
            "correctAnswer": True,
            "points": 10,
            "feedback": {"onCorrect": "Yes", "onIncorrect": "No"},
        })
        self._submit(client, "4.011")
        self._submit(client, True, question_id="q-tf")

        listing = client.get("/api/attempts/att-1/responses").json()
        score = client.get("/api/attempts/att-1/score").json()

        assert listing["totalResponses"] == 2
        assert score["score"] == 10
        assert score["maxScore"] == 20
        assert score["percentage"] == 50.0
        assert score["normalizedScore"] == 0.5
        assert score["correctCount"] == 1
