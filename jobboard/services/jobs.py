# jobboard/services/jobs.py
import logging

from jobboard.errors import BadRequest, Forbidden, NotFound
from jobboard.extensions import db
from jobboard.guards import can_manage_job, is_admin, is_recruiter
from jobboard.models import Application, Job, User

logger = logging.getLogger(__name__)


def _contains(column, text):
    """Case-insensitive substring match, wildcards in the input taken literally."""
    return column.icontains(text, autoescape=True)


def build_job_query(filters):
    """
    Turn the public search filters into a query. Every filter is optional and
    independent; jobs lacking a salary bound drop out when that bound is asked for.
    """
    query = Job.query

    if filters.search:
        query = query.filter(db.or_(_contains(Job.title, filters.search), _contains(Job.company, filters.search)))
    if filters.department:
        query = query.filter(Job.department == filters.department)
    if filters.location:
        query = query.filter(_contains(Job.location, filters.location))
    if filters.employment_type:
        query = query.filter(Job.employment_type == filters.employment_type)
    if filters.experience_level:
        query = query.filter(Job.experience_level == filters.experience_level)
    if filters.min_salary is not None:
        query = query.filter(Job.min_salary >= filters.min_salary)
    if filters.max_salary is not None:
        query = query.filter(Job.max_salary <= filters.max_salary)

    return query.order_by(Job.created_at.desc())


def list_jobs(filters):
    return build_job_query(filters).all()


def list_jobs_posted_by(user):
    return Job.query.filter_by(posted_by=user.id).order_by(Job.created_at.desc()).all()


def get_job_or_404(job_id):
    job = db.session.get(Job, job_id)
    if not job:
        raise NotFound("Job not found")
    return job


def create_job(user, data):
    job = Job(
        posted_by=user.id,
        title=data.title,
        company=data.company or user.company_name,
        location=data.location,
        employment_type=data.employment_type,
        department=data.department,
        description=data.description,
        salary=data.salary,
        min_salary=data.min_salary,
        max_salary=data.max_salary,
        experience_level=data.experience_level.value,
    )
    if not job.company:
        raise BadRequest("company: Field required")

    db.session.add(job)
    db.session.commit()
    logger.info(f"✅ Job posted: {job.title} ({job.id}) by {user.email}")
    return job


def delete_job(user, job_id):
    job = get_job_or_404(job_id)
    if not can_manage_job(user, job):
        raise Forbidden("Not authorized")

    db.session.delete(job)
    db.session.commit()
    logger.info(f"🗑️ Job removed: {job_id} by {user.email}")


def dashboard_stats(user):
    """Counts for the dashboard, scoped by the caller's role."""
    stats = {"jobsCount": 0, "applicationsCount": 0, "usersCount": 0}

    if is_admin(user):
        stats["jobsCount"] = Job.query.count()
        stats["applicationsCount"] = Application.query.count()
        stats["usersCount"] = User.query.count()
    elif is_recruiter(user):
        own_jobs = db.session.query(Job.id).filter(Job.posted_by == user.id)
        stats["jobsCount"] = own_jobs.count()
        stats["applicationsCount"] = Application.query.filter(Application.job_id.in_(own_jobs.scalar_subquery())).count()
    else:
        stats["jobsCount"] = Job.query.count()
        stats["applicationsCount"] = Application.query.filter_by(applicant_id=user.id).count()

    return stats
