from dataclasses import dataclass
from typing import Protocol

from exam_grades.grading.grades import GradeRecord


@dataclass(frozen=True)
class AssignmentRecord:
    id: str
    status: str


class GradeRepository(Protocol):
    def find(self, assignment_id: str) -> GradeRecord | None: ...

    def list(self) -> list[GradeRecord]: ...

    def upsert(self, record: GradeRecord) -> GradeRecord: ...

    def delete(self, assignment_id: str) -> bool: ...


class AssignmentRepository(Protocol):
    def get(self, assignment_id: str) -> AssignmentRecord | None: ...

    def set_status(self, assignment_id: str, status: str) -> None: ...

    def graded_scores(self, assignment_id: str) -> list[int]: ...
