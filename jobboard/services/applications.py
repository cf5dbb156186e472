# jobboard/services/applications.py
import logging

from sqlalchemy.exc import IntegrityError

from jobboard.errors import BadRequest, Forbidden, NotFound
from jobboard.extensions import db
from jobboard.guards import can_manage_job, can_post_jobs
from jobboard.models import Application, Job
from jobboard.services.jobs import get_job_or_404

logger = logging.getLogger(__name__)


def apply_to_job(user, job_id, data):
    """One application per (job, applicant); a second attempt is a 400."""
    if can_post_jobs(user):
        raise BadRequest("Recruiters cannot apply")

    job = get_job_or_404(job_id)

    existing = Application.query.filter_by(job_id=job.id, applicant_id=user.id).first()
    if existing:
        raise BadRequest("Already applied")

    application = Application(
        job_id=job.id,
        applicant_id=user.id,
        resume=user.resume or data.resume,
        cover_letter=data.cover_letter,
    )
    try:
        db.session.add(application)
        db.session.commit()
    except IntegrityError:
        # lost a race against a concurrent duplicate
        db.session.rollback()
        raise BadRequest("Already applied")

    logger.info(f"📨 {user.email} applied to {job.title} ({job.id})")
    return application


def applications_for_user(user):
    return (
        Application.query.filter_by(applicant_id=user.id)
        .order_by(Application.created_at.desc())
        .all()
    )


def applications_for_job(user, job_id):
    job = get_job_or_404(job_id)
    if not can_manage_job(user, job):
        raise Forbidden("Not authorized")
    return (
        Application.query.filter_by(job_id=job.id)
        .order_by(Application.created_at.desc())
        .all()
    )


def applications_for_recruiter(user):
    """Every application against any job the caller posted, newest first."""
    own_jobs = db.session.query(Job.id).filter(Job.posted_by == user.id)
    return (
        Application.query.filter(Application.job_id.in_(own_jobs.scalar_subquery()))
        .order_by(Application.created_at.desc())
        .all()
    )


def update_application(user, application_id, data):
    application = db.session.get(Application, application_id)
    if not application:
        raise NotFound("Application not found")

    if not application.job:
        raise NotFound("Job associated with this application not found")

    if not can_manage_job(user, application.job):
        raise Forbidden("Not authorized")

    if data.status is not None:
        application.status = data.status.value
    if data.feedback is not None:
        application.feedback = data.feedback

    db.session.commit()
    logger.info(f"📝 Application {application.id} -> {application.status}")
    return application


# ==================== SAVED JOBS ====================

def save_job(user, job_id):
    job = get_job_or_404(job_id)
    if job in user.saved_jobs:
        raise BadRequest("Job already saved")

    user.saved_jobs.append(job)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise BadRequest("Job already saved")
    return user.saved_jobs


def unsave_job(user, job_id):
    """Removing a job that is not saved is a no-op."""
    job = db.session.get(Job, job_id)
    if job is not None and job in user.saved_jobs:
        user.saved_jobs.remove(job)
        db.session.commit()
    return user.saved_jobs


def saved_jobs_for(user):
    return sorted(user.saved_jobs, key=lambda job: job.created_at, reverse=True)
