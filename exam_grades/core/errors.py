class GradingError(Exception):
    """Base class for errors raised by the grading core."""


class InvalidInput(GradingError):
    """Raised when there is nothing to compute from (e.g. an empty score list)."""


class AssignmentNotFound(GradingError):
    def __init__(self, assignment_id: str):
        super().__init__(f"Assignment {assignment_id} not found")
        self.assignment_id = assignment_id


class GradingNotAllowed(GradingError):
    def __init__(self, assignment_id: str, status: str):
        super().__init__(f"Assignment {assignment_id} is {status}; only submitted work can be graded")
        self.assignment_id = assignment_id
        self.status = status


class InvalidStatusTransition(GradingError):
    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move assignment from {current} back to {target}")
        self.current = current
        self.target = target
