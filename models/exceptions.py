"""
Exceptions dùng chung cho models và services
"""


class QuestionConfigurationError(ValueError):
    """Câu hỏi bị cấu hình sai (lỗi phía hệ thống, không phải lỗi của học sinh)"""


class UnknownQuestionTypeError(QuestionConfigurationError):
    """Loại câu hỏi không nằm trong QuestionType"""


class QuestionNotFoundError(LookupError):
    """Không tìm thấy câu hỏi theo question_id"""


class DuplicateResponseError(ValueError):
    """Học sinh đã nộp câu trả lời cho câu hỏi này trong lần làm bài hiện tại"""
