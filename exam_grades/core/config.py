import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# DEV default is a local sqlite file; point the env var at a real database elsewhere.
DATABASE_URL = os.getenv("EXAM_GRADES_DATABASE_URL", f"sqlite:///{BASE_DIR}/exam_grades.db")

# Grading policy
DEFAULT_ROUNDING_METHOD = "round"

# Magic links
MAGIC_TOKEN_BYTES = 24  # secrets.token_urlsafe -> 32 chars
