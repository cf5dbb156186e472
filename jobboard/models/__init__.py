from .enums import Role, UserStatus, ApplicationStatus, ExperienceLevel
from .user import User, saved_jobs
from .job import Job
from .application import Application
from .resume import Resume

__all__ = [
    "Role",
    "UserStatus",
    "ApplicationStatus",
    "ExperienceLevel",
    "User",
    "saved_jobs",
    "Job",
    "Application",
    "Resume",
]
