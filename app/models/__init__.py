# __init__.py
from app.models.combination import Combination
from app.models.job import Job
from app.models.program import Program
from app.models.school import School
from app.models.subject import Subject
from app.models.user import User

__all__ = [
	"Combination",
	"Job",
	"Program",
	"School",
	"Subject",
	"User",
]
