# __init__.py
from app.schemas.admin import AdminStatsResponse, CatalogCounts
from app.schemas.combination import CombinationCreate, CombinationRead, CombinationUpdate
from app.schemas.common import MessageResponse, Reference, RefSummary
from app.schemas.job import JobCreate, JobRead, JobUpdate
from app.schemas.program import ProgramCreate, ProgramRead, ProgramUpdate
from app.schemas.school import SchoolCreate, SchoolRead, SchoolUpdate
from app.schemas.search import SearchResponse
from app.schemas.subject import SubjectCreate, SubjectRead, SubjectUpdate
from app.schemas.user import Token, TokenData, UserCreate, UserLogin, UserRead

__all__ = [
	"AdminStatsResponse",
	"CatalogCounts",
	"CombinationCreate",
	"CombinationRead",
	"CombinationUpdate",
	"JobCreate",
	"JobRead",
	"JobUpdate",
	"MessageResponse",
	"ProgramCreate",
	"ProgramRead",
	"ProgramUpdate",
	"Reference",
	"RefSummary",
	"SchoolCreate",
	"SchoolRead",
	"SchoolUpdate",
	"SearchResponse",
	"SubjectCreate",
	"SubjectRead",
	"SubjectUpdate",
	"Token",
	"TokenData",
	"UserCreate",
	"UserLogin",
	"UserRead",
]
