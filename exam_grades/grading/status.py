from enum import Enum

from exam_grades.core.errors import InvalidStatusTransition


class AssignmentStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"
    GRADED = "graded"


# lifecycle order; an assignment only ever moves right
_ORDER = [
    AssignmentStatus.PENDING,
    AssignmentStatus.IN_PROGRESS,
    AssignmentStatus.SUBMITTED,
    AssignmentStatus.GRADED,
]


def advance(current: AssignmentStatus | str, target: AssignmentStatus | str) -> AssignmentStatus:
    """Return ``target`` if it is not behind ``current``; staying put is allowed."""
    current = AssignmentStatus(current)
    target = AssignmentStatus(target)
    if _ORDER.index(target) < _ORDER.index(current):
        raise InvalidStatusTransition(current.value, target.value)
    return target


def can_grade(status: AssignmentStatus | str) -> bool:
    # graded is accepted too: regrading overwrites the existing grade
    return AssignmentStatus(status) in (AssignmentStatus.SUBMITTED, AssignmentStatus.GRADED)
