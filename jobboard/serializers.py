# jobboard/serializers.py
from jobboard.models import Job, User, Application


def _iso(value):
    return value.isoformat() if value else None


def user_public_dict(user: User, with_avatar=False, with_profile=False):
    """The short user shape returned next to a token."""
    data = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "status": user.status,
    }
    if with_avatar:
        data["avatar"] = user.avatar
    if with_profile:
        data.update({
            "department": user.department,
            "year": user.year,
            "cgpa": user.cgpa,
            "skills": user.skills,
            "resume": user.resume,
            "companyName": user.company_name,
        })
    return data


def user_to_dict(user: User):
    """Full user document, never including the password hash."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "status": user.status,
        "avatar": user.avatar,
        "googleLinked": user.google_id is not None,
        "department": user.department,
        "year": user.year,
        "cgpa": user.cgpa,
        "skills": user.skills,
        "resume": user.resume,
        "companyName": user.company_name,
        "savedJobs": [job.id for job in user.saved_jobs],
        "createdAt": _iso(user.created_at),
        "updatedAt": _iso(user.updated_at),
    }


def applicant_to_dict(user: User):
    """Applicant fields a recruiter may see on an application."""
    if user is None:
        return None
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "resume": user.resume,
        "skills": user.skills,
        "cgpa": user.cgpa,
        "year": user.year,
        "department": user.department,
    }


def job_to_dict(job: Job):
    return {
        "id": job.id,
        "title": job.title,
        "company": job.company,
        "location": job.location,
        "type": job.employment_type,
        "department": job.department,
        "description": job.description,
        "salary": job.salary,
        "minSalary": job.min_salary,
        "maxSalary": job.max_salary,
        "experienceLevel": job.experience_level,
        "postedBy": job.posted_by,
        "createdAt": _iso(job.created_at),
        "updatedAt": _iso(job.updated_at),
    }


def job_summary_dict(job: Job):
    if job is None:
        return None
    return {
        "id": job.id,
        "title": job.title,
        "company": job.company,
        "location": job.location,
        "type": job.employment_type,
    }


def application_to_dict(application: Application):
    return {
        "id": application.id,
        "job": application.job_id,
        "applicant": application.applicant_id,
        "resume": application.resume,
        "coverLetter": application.cover_letter,
        "status": application.status,
        "feedback": application.feedback,
        "createdAt": _iso(application.created_at),
        "updatedAt": _iso(application.updated_at),
    }


def my_application_dict(application: Application):
    """Seeker view: the application plus denormalized job title/company."""
    data = application_to_dict(application)
    job = application.job
    data["job"] = job_summary_dict(job)
    data["jobId"] = job.id if job else application.job_id
    data["jobTitle"] = job.title if job else None
    data["company"] = job.company if job else None
    return data


def recruiter_application_dict(application: Application, include_job=False):
    """Recruiter view: the application plus the applicant's profile."""
    data = application_to_dict(application)
    data["applicant"] = applicant_to_dict(application.applicant)
    if include_job:
        data["job"] = job_summary_dict(application.job)
    return data
