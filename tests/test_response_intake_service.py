import threading

import pytest

from models.exceptions import (
    DuplicateResponseError,
    QuestionConfigurationError,
    QuestionNotFoundError,
)
from services.response_intake_service import QuestionRepository, ResponseIntakeService


@pytest.fixture
def intake(all_questions):
    return ResponseIntakeService(QuestionRepository(all_questions))


def test_submit_answer_persists_verdict(intake):
    response = intake.submit_answer("num", "attempt-1", "student-1", "4.00", time_spent=12)

    assert response.verdict.is_correct is True
    assert response.verdict.score_awarded == 10
    assert response.submitted_answer == "4.00"
    assert response.time_spent == 12.0
    assert response.status == "graded"
    assert intake.get_responses_for_attempt("attempt-1") == [response]


def test_malformed_answer_is_graded_not_rejected(intake):
    response = intake.submit_answer("mc-multi", "attempt-1", "student-1", "garbage")

    assert response.verdict.is_correct is False
    assert response.verdict.score_awarded == 0


def test_unknown_question(intake):
    with pytest.raises(QuestionNotFoundError):
        intake.submit_answer("missing", "attempt-1", "student-1", 1)


def test_duplicate_submission_is_rejected(intake):
    intake.submit_answer("tf", "attempt-1", "student-1", False)

    with pytest.raises(DuplicateResponseError):
        intake.submit_answer("tf", "attempt-1", "student-1", True)

    assert len(intake.get_responses_for_attempt("attempt-1")) == 1
    assert intake.submit_answer("tf", "attempt-2", "student-1", True).verdict.is_correct


def test_resubmission_replaces_previous_response(all_questions):
    intake = ResponseIntakeService(QuestionRepository(all_questions), allow_resubmission=True)

    intake.submit_answer("tf", "attempt-1", "student-1", False)
    intake.submit_answer("tf", "attempt-1", "student-1", True)

    responses = intake.get_responses_for_attempt("attempt-1")
    assert len(responses) == 1
    assert responses[0].verdict.is_correct is True


def test_concurrent_duplicates_store_a_single_response(intake):
    errors = []

    def submit():
        try:
            intake.submit_answer("text", "attempt-9", "student-1", "6x + 2")
        except DuplicateResponseError as e:
            errors.append(e)

    threads = [threading.Thread(target=submit) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(intake.get_responses_for_attempt("attempt-9")) == 1
    assert len(errors) == 7


def test_misconfigured_question_propagates(intake, numeric_question):
    object.__setattr__(numeric_question, "tolerance", -1)

    with pytest.raises(QuestionConfigurationError):
        intake.submit_answer("num", "attempt-1", "student-1", 4)

    assert intake.get_responses_for_attempt("attempt-1") == []


def test_repository_add_without_replace(single_choice_question):
    repository = QuestionRepository([single_choice_question])

    with pytest.raises(ValueError):
        repository.add(single_choice_question, replace=False)
    assert len(repository) == 1
    assert repository.get("mc-single") is single_choice_question
