"""Request schemas, validated at the route boundary before touching the database."""

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from jobboard.errors import BadRequest
from jobboard.models.enums import ApplicationStatus, ExperienceLevel, UserStatus


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _Schema(BaseModel):
    class Config:
        populate_by_name = True
        extra = "ignore"


# Auth schemas
class _ProfileFields(_Schema):
    department: str | None = None
    year: str | None = None
    cgpa: float | None = None
    skills: str | None = None
    resume: str | None = None
    company_name: str | None = Field(default=None, alias="companyName")

    @field_validator("department", "cgpa", "skills", "resume", "company_name", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)

    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, value):
        value = _blank_to_none(value)
        return str(value) if isinstance(value, int) else value

    @field_validator("skills", mode="before")
    @classmethod
    def skills_as_text(cls, value):
        if isinstance(value, list):
            return ", ".join(str(s).strip() for s in value if str(s).strip())
        return value


class RegisterRequest(_ProfileFields):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
    role: str | None = None


class LoginRequest(_Schema):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class GoogleLoginRequest(_Schema):
    token: str = Field(min_length=1)
    role: str | None = None


class ProfileUpdateRequest(_ProfileFields):
    name: str | None = None
    email: str | None = None
    password: str | None = None

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def blank_keeps_current(cls, value):
        return _blank_to_none(value)


class UserStatusUpdate(_Schema):
    status: UserStatus


# Job schemas
class JobCreateRequest(_Schema):
    title: str = Field(min_length=1)
    company: str | None = None
    location: str = Field(min_length=1)
    employment_type: str = Field(min_length=1, alias="type")
    department: str | None = None
    description: str = Field(min_length=1)
    salary: str | None = None
    min_salary: int | None = Field(default=None, ge=0, alias="minSalary")
    max_salary: int | None = Field(default=None, ge=0, alias="maxSalary")
    experience_level: ExperienceLevel = Field(default=ExperienceLevel.ENTRY, alias="experienceLevel")

    @field_validator("company", "department", "salary", "min_salary", "max_salary", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)

    @field_validator("experience_level", mode="before")
    @classmethod
    def default_level(cls, value):
        return _blank_to_none(value) or ExperienceLevel.ENTRY

    @model_validator(mode="after")
    def salary_bounds_ordered(self):
        if self.min_salary is not None and self.max_salary is not None and self.min_salary > self.max_salary:
            raise ValueError("minSalary cannot be greater than maxSalary")
        return self


class JobFilters(_Schema):
    search: str | None = None
    department: str | None = None
    location: str | None = None
    employment_type: str | None = Field(default=None, alias="type")
    # unknown levels simply match nothing
    experience_level: str | None = Field(default=None, alias="experienceLevel")
    min_salary: int | None = Field(default=None, alias="minSalary")
    max_salary: int | None = Field(default=None, alias="maxSalary")

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)


# Application schemas
class ApplyRequest(_Schema):
    resume: str | None = None
    cover_letter: str | None = Field(default=None, alias="coverLetter")


class ApplicationUpdateRequest(_Schema):
    status: ApplicationStatus | None = None
    feedback: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)


def parse(schema, data):
    """Validate a request payload, turning pydantic errors into a 400."""
    try:
        return schema.model_validate(data or {})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "__root__")
        message = first.get("msg", "Invalid input")
        raise BadRequest(f"{field}: {message}" if field else message) from e
