import enum


class Role(str, enum.Enum):
    JOB_SEEKER = "Job Seeker"
    RECRUITER = "Recruiter"
    ADMIN = "Admin"

    @classmethod
    def normalize(cls, value, default=None):
        """Map loose client spellings ("job-seeker", "recruiter") onto the enum."""
        if value is None:
            return default
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", " ").replace("_", " ")
        aliases = {
            "job seeker": cls.JOB_SEEKER,
            "jobseeker": cls.JOB_SEEKER,
            "student": cls.JOB_SEEKER,
            "recruiter": cls.RECRUITER,
            "admin": cls.ADMIN,
        }
        return aliases.get(key, default)


class UserStatus(str, enum.Enum):
    ACTIVE = "active"
    PENDING = "pending"
    DEACTIVATED = "deactivated"


class ApplicationStatus(str, enum.Enum):
    PENDING = "Pending"
    SHORTLISTED = "Shortlisted"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class ExperienceLevel(str, enum.Enum):
    ENTRY = "Entry Level"
    MID = "Mid Level"
    SENIOR = "Senior Level"
    EXECUTIVE = "Executive"
    INTERNSHIP = "Internship"


def enum_values(enum_cls):
    return [member.value for member in enum_cls]
