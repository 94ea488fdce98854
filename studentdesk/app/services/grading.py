"""Average and letter grade computation for the five subject scores."""

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping, Tuple

SUBJECTS = ("tamil", "english", "maths", "science", "social")

# Evaluated high to low; first matching floor wins.
GRADE_THRESHOLDS = (
    (Decimal("90"), "A+"),
    (Decimal("75"), "A"),
    (Decimal("60"), "B"),
)
LOWEST_GRADE = "C"

TWO_PLACES = Decimal("0.01")

# Scores beyond this magnitude cannot be stored as an INTEGER column and count as 0.
SCORE_LIMIT = 10**15

_ISSUER = object()


@dataclass(frozen=True)
class GradedMarks:
    """
    A full marks row: stored integer scores plus avg/grade.

    avg/grade are computed from the coerced scores before they are rounded for
    storage. Only grade_marks() can build one.
    """

    tamil: int
    english: int
    maths: int
    science: int
    social: int
    avg: float
    grade: str
    _issuer: object = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self._issuer is not _ISSUER:
            raise TypeError("GradedMarks can only be built by grade_marks()")

    @property
    def scores(self) -> dict[str, int]:
        return {subject: getattr(self, subject) for subject in SUBJECTS}

    def as_row(self) -> dict[str, Any]:
        return {**self.scores, "avg": self.avg, "grade": self.grade}


def _within_limit(number: int | float) -> int | float:
    return number if abs(number) <= SCORE_LIMIT else 0


def coerce_score(value: Any) -> int | float:
    """Coerce a raw score to a finite, storable number. Missing or unusable values become 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _within_limit(value)
    if isinstance(value, (float, Decimal)):
        number = float(value)
        return _within_limit(number) if math.isfinite(number) else 0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return 0
        return _within_limit(number) if math.isfinite(number) else 0
    return 0


def _to_decimal(value: int | float) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal(0)


def grade_for_average(avg: float | Decimal) -> str:
    if not isinstance(avg, Decimal):
        avg = _to_decimal(avg)
    for floor, grade in GRADE_THRESHOLDS:
        if avg >= floor:
            return grade
    return LOWEST_GRADE


def compute_grade(tamil: Any = None, english: Any = None, maths: Any = None, science: Any = None, social: Any = None) -> Tuple[float, str]:
    scores = [coerce_score(s) for s in (tamil, english, maths, science, social)]
    total = sum((_to_decimal(s) for s in scores), Decimal(0))
    avg = (total / len(scores)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return float(avg), grade_for_average(avg)


def normalize_score(value: Any) -> int:
    """Coerce a raw score and round it half-up to the integer that gets stored."""
    return int(_to_decimal(coerce_score(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def grade_marks(raw_scores: Mapping[str, Any] | None = None) -> GradedMarks:
    """
    Build the marks row to persist from raw subject scores.

    avg/grade are computed from the coerced scores, the same values
    compute_grade would see. Each score is then rounded half-up to the integer
    that gets stored.
    """
    raw_scores = raw_scores or {}
    coerced = {subject: coerce_score(raw_scores.get(subject)) for subject in SUBJECTS}
    avg, grade = compute_grade(**coerced)
    stored = {subject: normalize_score(value) for subject, value in coerced.items()}
    return GradedMarks(avg=avg, grade=grade, _issuer=_ISSUER, **stored)


ZERO_MARKS = grade_marks()
