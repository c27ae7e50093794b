"""
Question API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException
from api.schemas import QuestionCreateRequest, QuestionListResponse, QuestionSummaryResponse
from api.shared import get_question_repository
from models.exceptions import QuestionConfigurationError, QuestionNotFoundError
from services.question_loader_service import QuestionLoaderService
from services.response_intake_service import QuestionRepository

router = APIRouter(prefix="/api/questions", tags=["Questions"])


@router.post("",
             response_model=QuestionSummaryResponse,
             status_code=201,
             summary="Tạo câu hỏi mới")
async def create_question(
    request: QuestionCreateRequest,
    repository: QuestionRepository = Depends(get_question_repository)
):
    """
    Tạo câu hỏi và kiểm tra cấu hình ngay lúc tạo

    - 400: câu hỏi sai cấu hình (thiếu đáp án, tolerance âm, đáp án không khớp loại)
    - 409: questionId đã tồn tại
    """
    try:
        question = QuestionLoaderService.build_question(request.to_payload())
    except QuestionConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        repository.add(question, replace=False)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return QuestionSummaryResponse.from_question(question)


@router.get("/{question_id}",
            response_model=QuestionSummaryResponse,
            summary="Lấy thông tin câu hỏi")
async def get_question(
    question_id: str,
    repository: QuestionRepository = Depends(get_question_repository)
):
    try:
        question = repository.get(question_id)
    except QuestionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return QuestionSummaryResponse.from_question(question)


@router.get("",
            response_model=QuestionListResponse,
            summary="Lấy danh sách câu hỏi")
async def list_questions(
    repository: QuestionRepository = Depends(get_question_repository)
):
    """Danh sách câu hỏi đã đăng ký (không lộ đáp án)"""
    questions = [QuestionSummaryResponse.from_question(q) for q in repository.list_all()]
    return QuestionListResponse(questions=questions, total_questions=len(questions))
