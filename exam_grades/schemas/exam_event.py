from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ExamEventType(str, Enum):
    TAB_HIDDEN = "tab_hidden"
    TAB_VISIBLE = "tab_visible"
    WINDOW_BLUR = "window_blur"
    WINDOW_FOCUS = "window_focus"
    COPY = "copy"
    PASTE = "paste"
    CUT = "cut"
    RIGHT_CLICK = "right_click"
    FULLSCREEN_EXIT = "fullscreen_exit"
    DEVTOOLS_OPEN = "devtools_open"
    SCREENSHOT_ATTEMPT = "screenshot_attempt"
    PRINT_ATTEMPT = "print_attempt"
    KEYBOARD_SHORTCUT = "keyboard_shortcut"
    IDLE_TIMEOUT = "idle_timeout"
    RAPID_ANSWERS = "rapid_answers"
    BROWSER_RESIZE = "browser_resize"
    CONNECTION_LOST = "connection_lost"
    CONNECTION_RESTORED = "connection_restored"
    EXAM_STARTED = "exam_started"
    EXAM_SUBMITTED = "exam_submitted"


class ExamEventSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class WindowDimensions(BaseModel):
    width: int
    height: int


class ExamEventDetails(BaseModel):
    duration_seconds: Optional[float] = None
    pasted_length: Optional[int] = None
    shortcut_keys: Optional[str] = None
    idle_duration_seconds: Optional[float] = None
    question_index: Optional[int] = None
    answer_time_seconds: Optional[float] = None
    window_dimensions: Optional[WindowDimensions] = None
    message: Optional[str] = None


class ExamEventCreate(BaseModel):
    assignment_id: str
    event_type: ExamEventType
    severity: ExamEventSeverity
    timestamp: datetime
    details: ExamEventDetails = Field(default_factory=ExamEventDetails)


class ExamEventRead(BaseModel):
    id: str
    assignment_id: str
    event_type: ExamEventType
    severity: ExamEventSeverity
    timestamp: datetime
    details: dict

    class Config:
        from_attributes = True


class ExamEventSummary(BaseModel):
    assignment_id: str
    total: int
    by_severity: dict[str, int]
    by_type: dict[str, int]
