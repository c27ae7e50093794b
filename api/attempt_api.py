"""
Attempt API endpoints
API nộp câu trả lời, xem câu trả lời và điểm của một lần làm bài
"""

from fastapi import APIRouter, Depends, HTTPException
from api.schemas import (
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    QuestionResponseSchema,
    AttemptResponsesResponse,
    AttemptScoreResponse,
)
from api.shared import get_intake_service
from models.exceptions import (
    DuplicateResponseError,
    QuestionConfigurationError,
    QuestionNotFoundError,
)
from services.attempt_score_service import AttemptScoreService
from services.response_intake_service import ResponseIntakeService

router = APIRouter(prefix="/api/attempts", tags=["Attempts"])


@router.post("/{attempt_id}/responses",
             response_model=SubmitAnswerResponse,
             status_code=201,
             summary="Nộp câu trả lời cho một câu hỏi")
async def submit_answer(
    attempt_id: str,
    request: SubmitAnswerRequest,
    intake: ResponseIntakeService = Depends(get_intake_service)
):
    """
    Nộp và chấm câu trả lời

    - 400: submittedAnswer rỗng (null)
    - 404: không có câu hỏi
    - 409: câu hỏi đã được trả lời trong lần làm bài này
    - 500: câu hỏi sai cấu hình (lỗi nội bộ, không phải lỗi của học sinh)
    """
    if request.submitted_answer is None:
        raise HTTPException(status_code=400, detail="submittedAnswer là bắt buộc")

    try:
        response = intake.submit_answer(
            question_id=request.question_id,
            attempt_id=attempt_id,
            student_id=request.student_id,
            submitted_answer=request.submitted_answer,
            time_spent=request.time_spent,
        )
    except QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DuplicateResponseError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except QuestionConfigurationError:
        raise HTTPException(status_code=500, detail="Internal grading error")

    feedback = intake.question_repository.get(request.question_id).feedback
    return SubmitAnswerResponse(
        response=QuestionResponseSchema.from_response(response),
        explanation=feedback.explanation,
        hint=feedback.hint,
        message="Response graded successfully",
    )


@router.get("/{attempt_id}/responses",
            response_model=AttemptResponsesResponse,
            summary="Lấy các câu trả lời của một lần làm bài")
async def get_attempt_responses(
    attempt_id: str,
    intake: ResponseIntakeService = Depends(get_intake_service)
):
    responses = intake.get_responses_for_attempt(attempt_id)
    return AttemptResponsesResponse(
        attempt_id=attempt_id,
        responses=[QuestionResponseSchema.from_response(r) for r in responses],
        total_responses=len(responses),
    )


@router.get("/{attempt_id}/score",
            response_model=AttemptScoreResponse,
            summary="Tính điểm tổng của một lần làm bài")
async def get_attempt_score(
    attempt_id: str,
    intake: ResponseIntakeService = Depends(get_intake_service)
):
    """
    Tổng hợp điểm từ các verdict đã lưu

    normalizedScore (0-1) là giá trị dùng cho grade passback lên LMS.
    """
    responses = intake.get_responses_for_attempt(attempt_id)
    score = AttemptScoreService.summarize(attempt_id, responses)
    return AttemptScoreResponse.from_score(score)
