# jobboard/guards.py
from functools import wraps

from flask_jwt_extended import current_user, jwt_required

from jobboard.errors import Forbidden
from jobboard.models import Job, Role, User


def is_admin(user: User) -> bool:
    return user.role == Role.ADMIN


def is_recruiter(user: User) -> bool:
    return user.role == Role.RECRUITER


def is_job_seeker(user: User) -> bool:
    return user.role == Role.JOB_SEEKER


def can_post_jobs(user: User) -> bool:
    return is_recruiter(user) or is_admin(user)


def owns_job(user: User, job: Job) -> bool:
    return job is not None and job.posted_by == user.id


def can_manage_job(user: User, job: Job) -> bool:
    return is_admin(user) or owns_job(user, job)


def ensure(allowed: bool, message="Not authorized"):
    if not allowed:
        raise Forbidden(message)


def roles_required(*roles, message="Not authorized"):
    """jwt_required() plus a role check on the resolved current_user."""

    def decorator(fn):
        @wraps(fn)
        @jwt_required()
        def wrapper(*args, **kwargs):
            ensure(current_user.role in roles, message)
            return fn(*args, **kwargs)

        return wrapper

    return decorator


admin_required = roles_required(Role.ADMIN, message="Not authorized as an admin")
