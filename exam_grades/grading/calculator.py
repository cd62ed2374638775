import math
from enum import Enum
from typing import Sequence

from exam_grades.core.errors import InvalidInput

# Per-question scores and final grades share the same ordinal scale.
MIN_SCORE = 2
MAX_SCORE = 5
QUESTION_SCORES = (2, 3, 4, 5)


class RoundingMethod(str, Enum):
    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"


def compute_average(scores: Sequence[int]) -> float:
    """
    Arithmetic mean of the graded answers.

    Ungraded answers must be filtered out by the caller. Scores are not
    checked against the 2-5 scale here; only the derived grade is clamped.
    """
    if not scores:
        raise InvalidInput("Cannot average an empty list of scores")
    return sum(scores) / len(scores)


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def compute_final_grade(average: float, rounding_method: RoundingMethod | str) -> int:
    """
    Round an average to a final grade and clamp it into 2..5.

    - floor: toward -inf
    - ceil: toward +inf
    - round: nearest, ties away from zero (4.5 -> 5)
    """
    method = RoundingMethod(rounding_method)

    if method is RoundingMethod.FLOOR:
        grade = math.floor(average)
    elif method is RoundingMethod.CEIL:
        grade = math.ceil(average)
    else:
        grade = _round_half_away_from_zero(average)

    return max(MIN_SCORE, min(MAX_SCORE, grade))


def calculate(scores: Sequence[int], rounding_method: RoundingMethod | str) -> tuple[float, int]:
    average = compute_average(scores)
    return average, compute_final_grade(average, rounding_method)
