from ..extensions import db
from datetime import datetime
import uuid

from sqlalchemy.dialects import mysql

from .enums import Role, UserStatus, enum_values


saved_jobs = db.Table(
    "saved_jobs",
    db.Column("user_id", db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    db.Column("job_id", db.String(36), db.ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True),
    db.Column("saved_at", db.DateTime, default=datetime.utcnow),
)


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    # binary collation keeps uniqueness case-sensitive on MySQL
    email = db.Column(
        db.String(255).with_variant(mysql.VARCHAR(255, collation="utf8mb4_bin"), "mysql"),
        unique=True,
        nullable=False,
    )
    # null for federated accounts that never set a local password
    password = db.Column(db.String(255), nullable=True)
    role = db.Column(
        db.Enum(*enum_values(Role), name="user_roles"),
        nullable=False,
        default=Role.JOB_SEEKER.value,
    )
    google_id = db.Column(db.String(255), unique=True, nullable=True)
    avatar = db.Column(db.String(512))
    status = db.Column(
        db.Enum(*enum_values(UserStatus), name="user_statuses"),
        nullable=False,
        default=UserStatus.ACTIVE.value,
    )

    # job seeker profile
    department = db.Column(db.String(255))
    year = db.Column(db.String(50))
    cgpa = db.Column(db.Float)
    skills = db.Column(db.Text)
    resume = db.Column(db.String(512))  # "uploaded" once a Resume record exists

    # recruiter profile
    company_name = db.Column(db.String(255))

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    jobs = db.relationship("Job", back_populates="posted_by_user", cascade="all, delete-orphan")
    applications = db.relationship("Application", back_populates="applicant", cascade="all, delete-orphan")
    resume_record = db.relationship("Resume", back_populates="candidate", uselist=False, cascade="all, delete-orphan")
    saved_jobs = db.relationship("Job", secondary=saved_jobs, back_populates="saved_by")

    @property
    def is_active_account(self):
        return self.status == UserStatus.ACTIVE.value

    # for string representation
    def __repr__(self):
        return f"<User {self.email}>"
