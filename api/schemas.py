"""
API Schemas - Request/Response models
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from models.question import Question
from models.question_response import QuestionResponse
from models.validation_verdict import ValidationVerdict
from services.attempt_score_service import AttemptScore


class QuestionConfigSchema(BaseModel):
    """Cấu hình riêng theo loại câu hỏi"""
    model_config = ConfigDict(populate_by_name=True)

    options: Optional[List[str]] = Field(default=None, description="Các phương án (multiple_choice)")
    tolerance: Optional[float] = Field(default=None, description="Sai số cho phép (numeric)")
    case_sensitive: Optional[bool] = Field(
        default=None, alias="caseSensitive", description="Phân biệt hoa thường (short_text, math_expression)"
    )
    accepted_alternatives: Optional[List[str]] = Field(
        default=None, alias="acceptedAlternatives", description="Các đáp án thay thế được chấp nhận"
    )


class QuestionFeedbackSchema(BaseModel):
    """Feedback của câu hỏi"""
    model_config = ConfigDict(populate_by_name=True)

    on_correct: str = Field(..., alias="onCorrect")
    on_incorrect: str = Field(..., alias="onIncorrect")
    explanation: Optional[str] = None
    hint: Optional[str] = None


class QuestionSchema(BaseModel):
    """Định nghĩa câu hỏi do người soạn gửi lên"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "questionId": "q-derivative-1",
                "type": "numeric",
                "correctAnswer": 4,
                "config": {"tolerance": 0.01},
                "points": 10,
                "feedback": {
                    "onCorrect": "Correct!",
                    "onIncorrect": "Try again.",
                    "hint": "Evaluate f'(2).",
                },
            }
        },
    )

    question_id: str = Field(default="", alias="questionId")
    type: Literal["multiple_choice", "true_false", "short_text", "numeric", "math_expression"]
    correct_answer: Any = Field(..., alias="correctAnswer")
    config: QuestionConfigSchema = Field(default_factory=QuestionConfigSchema)
    points: float = Field(..., ge=0, description="Điểm tối đa")
    feedback: QuestionFeedbackSchema

    def to_payload(self) -> Dict:
        """Dạng payload cho QuestionLoaderService.build_question"""
        return self.model_dump(by_alias=True, exclude_none=True)


class QuestionCreateRequest(QuestionSchema):
    """Request tạo câu hỏi, bắt buộc có questionId"""

    @model_validator(mode='after')
    def validate_question_id(self):
        if not self.question_id.strip():
            raise ValueError("'questionId' là bắt buộc")
        return self


class ValidationVerdictSchema(BaseModel):
    """Kết quả chấm"""
    model_config = ConfigDict(populate_by_name=True)

    is_correct: bool = Field(..., alias="isCorrect")
    score_awarded: float = Field(..., alias="scoreAwarded")
    score_max: float = Field(..., alias="scoreMax")
    feedback_shown: str = Field(..., alias="feedbackShown")

    @classmethod
    def from_verdict(cls, verdict: ValidationVerdict) -> "ValidationVerdictSchema":
        return cls(**verdict.to_dict())


class ValidateAnswerRequest(BaseModel):
    """Request chấm thử một câu trả lời (không lưu)"""
    model_config = ConfigDict(populate_by_name=True)

    question: QuestionSchema
    submitted_answer: Any = Field(default=None, alias="submittedAnswer")


class SubmitAnswerRequest(BaseModel):
    """Request nộp câu trả lời trong một lần làm bài"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "questionId": "q-derivative-1",
                "studentId": "student-42",
                "submittedAnswer": "4.00",
                "timeSpent": 35,
            }
        },
    )

    question_id: str = Field(..., alias="questionId")
    student_id: str = Field(..., alias="studentId")
    submitted_answer: Any = Field(..., alias="submittedAnswer")
    time_spent: float = Field(default=0.0, ge=0, alias="timeSpent", description="Thời gian làm (giây)")


class QuestionSummaryResponse(BaseModel):
    """Thông tin câu hỏi trả về (không lộ đáp án)"""
    model_config = ConfigDict(populate_by_name=True)

    question_id: str = Field(..., alias="questionId")
    type: str
    points: float
    options: Optional[List[str]] = None

    @classmethod
    def from_question(cls, question: Question) -> "QuestionSummaryResponse":
        options = getattr(question, "options", None)
        return cls(
            question_id=question.question_id,
            type=question.type.value,
            points=question.points,
            options=list(options) if options else None,
        )


class QuestionListResponse(BaseModel):
    """Danh sách câu hỏi trong ngân hàng"""
    model_config = ConfigDict(populate_by_name=True)

    questions: List[QuestionSummaryResponse]
    total_questions: int = Field(..., alias="totalQuestions")


class QuestionResponseSchema(BaseModel):
    """Câu trả lời đã chấm"""
    model_config = ConfigDict(populate_by_name=True)

    response_id: str = Field(..., alias="responseId")
    question_id: str = Field(..., alias="questionId")
    attempt_id: str = Field(..., alias="attemptId")
    student_id: str = Field(..., alias="studentId")
    submitted_answer: Any = Field(..., alias="submittedAnswer")
    validation: ValidationVerdictSchema
    time_spent: float = Field(..., alias="timeSpent")
    submitted_at: int = Field(..., alias="submittedAt")
    status: str

    @classmethod
    def from_response(cls, response: QuestionResponse) -> "QuestionResponseSchema":
        return cls(
            response_id=response.response_id,
            question_id=response.question_id,
            attempt_id=response.attempt_id,
            student_id=response.student_id,
            submitted_answer=response.submitted_answer,
            validation=ValidationVerdictSchema.from_verdict(response.verdict),
            time_spent=response.time_spent,
            submitted_at=response.submitted_at,
            status=response.status,
        )


class SubmitAnswerResponse(BaseModel):
    """Response sau khi nộp câu trả lời, kèm explanation / hint của câu hỏi"""
    model_config = ConfigDict(populate_by_name=True)

    response: QuestionResponseSchema
    explanation: Optional[str] = None
    hint: Optional[str] = None
    message: str


class AttemptResponsesResponse(BaseModel):
    """Danh sách câu trả lời của một lần làm bài"""
    model_config = ConfigDict(populate_by_name=True)

    attempt_id: str = Field(..., alias="attemptId")
    responses: List[QuestionResponseSchema]
    total_responses: int = Field(..., alias="totalResponses")


class AttemptScoreResponse(BaseModel):
    """Điểm tổng của một lần làm bài"""
    model_config = ConfigDict(populate_by_name=True)

    attempt_id: str = Field(..., alias="attemptId")
    score: float
    max_score: float = Field(..., alias="maxScore")
    percentage: float = Field(..., description="Phần trăm điểm (0-100)")
    normalized_score: float = Field(..., alias="normalizedScore", description="Điểm passback trong [0, 1]")
    answered_count: int = Field(..., alias="answeredCount")
    correct_count: int = Field(..., alias="correctCount")

    @classmethod
    def from_score(cls, score: AttemptScore) -> "AttemptScoreResponse":
        return cls(
            attempt_id=score.attempt_id,
            score=score.score,
            max_score=score.max_score,
            percentage=score.percentage,
            normalized_score=score.normalized_score,
            answered_count=score.answered_count,
            correct_count=score.correct_count,
        )
