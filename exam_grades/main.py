import logging

from fastapi import FastAPI

from exam_grades.core.error_handlers import register_error_handlers
from exam_grades.core.logging_middleware import LoggingMiddleware
from exam_grades.db.init_db import init_db
from exam_grades.routers.assignments import router as assignments_router
from exam_grades.routers.exam import router as exam_router
from exam_grades.routers.exams import router as exams_router
from exam_grades.routers.grades import router as grades_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Exam Grades")

# Middleware
app.add_middleware(LoggingMiddleware)

# Domain errors -> HTTP status codes
register_error_handlers(app)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event
@app.on_event("startup")
def on_startup():
    init_db()


# Include routers
app.include_router(exams_router, prefix="/exams", tags=["exams"])
app.include_router(assignments_router, prefix="/assignments", tags=["assignments"])
app.include_router(exam_router, prefix="/exam", tags=["exam"])
app.include_router(grades_router, prefix="/grades", tags=["grades"])
