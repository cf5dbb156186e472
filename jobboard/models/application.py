from ..extensions import db
from datetime import datetime
import uuid

from .enums import ApplicationStatus, enum_values


class Application(db.Model):
    __tablename__ = "applications"
    __table_args__ = (
        db.UniqueConstraint("job_id", "applicant_id", name="uq_application_job_applicant"),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    job_id = db.Column(db.String(36), db.ForeignKey("jobs.id", ondelete="SET NULL"), nullable=True)
    applicant_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    resume = db.Column(db.String(512))
    cover_letter = db.Column(db.Text)
    status = db.Column(
        db.Enum(*enum_values(ApplicationStatus), name="application_statuses"),
        nullable=False,
        default=ApplicationStatus.PENDING.value,
    )
    feedback = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    job = db.relationship("Job", back_populates="applications")
    applicant = db.relationship("User", back_populates="applications")
