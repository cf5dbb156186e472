from ..extensions import db
from datetime import datetime
import uuid

from .enums import ExperienceLevel, enum_values
from .user import saved_jobs


class Job(db.Model):
    __tablename__ = "jobs"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    posted_by = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    employment_type = db.Column(db.String(100), nullable=False)  # Full-time, Internship, ...
    department = db.Column(db.String(255))
    description = db.Column(db.Text, nullable=False)
    salary = db.Column(db.String(255))  # display string, e.g. "$80k - $100k"
    min_salary = db.Column(db.Integer)
    max_salary = db.Column(db.Integer)
    experience_level = db.Column(
        db.Enum(*enum_values(ExperienceLevel), name="experience_levels"),
        nullable=False,
        default=ExperienceLevel.ENTRY.value,
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    posted_by_user = db.relationship("User", back_populates="jobs")
    # no delete cascade: applications survive their job with a null reference
    applications = db.relationship("Application", back_populates="job")
    saved_by = db.relationship("User", secondary=saved_jobs, back_populates="saved_jobs")

    def __repr__(self):
        return f"<Job {self.title} @ {self.company}>"
