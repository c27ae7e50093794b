import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from models.question import (
    MathExpressionQuestion,
    MultipleChoiceQuestion,
    NumericQuestion,
    QuestionFeedback,
    ShortTextQuestion,
    TrueFalseQuestion,
)


@pytest.fixture
def feedback():
    return QuestionFeedback(
        on_correct="Correct!",
        on_incorrect="Not quite.",
        explanation="Because maths.",
        hint="Think again.",
    )


@pytest.fixture
def single_choice_question(feedback):
    return MultipleChoiceQuestion(
        question_id="mc-single",
        points=8,
        feedback=feedback,
        correct_answer=2,
        options=("a", "b", "c", "d"),
    )


@pytest.fixture
def multi_choice_question(feedback):
    return MultipleChoiceQuestion(
        question_id="mc-multi",
        points=6,
        feedback=feedback,
        correct_answer=(0, 1, 2),
        options=("a", "b", "c", "d"),
    )


@pytest.fixture
def true_false_question(feedback):
    return TrueFalseQuestion(question_id="tf", points=2, feedback=feedback, correct_answer=True)


@pytest.fixture
def short_text_question(feedback):
    return ShortTextQuestion(
        question_id="text",
        points=5,
        feedback=feedback,
        correct_answer="6x + 2",
    )


@pytest.fixture
def math_question(feedback):
    return MathExpressionQuestion(
        question_id="math",
        points=4,
        feedback=feedback,
        correct_answer="sin(x)+C",
        accepted_alternatives=("sin(x) + C", "sinx+C"),
    )


@pytest.fixture
def numeric_question(feedback):
    return NumericQuestion(
        question_id="num",
        points=10,
        feedback=feedback,
        correct_answer=4,
        tolerance=0.01,
    )


@pytest.fixture
def all_questions(single_choice_question, multi_choice_question, true_false_question,
                  short_text_question, math_question, numeric_question):
    return [
        single_choice_question,
        multi_choice_question,
        true_false_question,
        short_text_question,
        math_question,
        numeric_question,
    ]


@pytest.fixture
def numeric_payload():
    return {
        "questionId": "q-num",
        "type": "numeric",
        "correctAnswer": 4,
        "config": {"tolerance": 0.01},
        "points": 10,
        "feedback": {
            "onCorrect": "Correct!",
            "onIncorrect": "Try again.",
            "explanation": "f'(2) = 4",
            "hint": "Evaluate the derivative at 2.",
        },
    }
