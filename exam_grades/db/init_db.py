from exam_grades.db.base_class import Base
from exam_grades.db.session import engine

# import models so SQLAlchemy registers them
from exam_grades.models import answer, assignment, exam, exam_event, grade  # noqa: F401


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
