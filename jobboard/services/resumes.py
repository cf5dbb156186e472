# jobboard/services/resumes.py
import logging
from datetime import datetime

from flask import current_app
from werkzeug.utils import secure_filename

from jobboard.errors import BadRequest, Forbidden, NotFound
from jobboard.extensions import db, resume_storage
from jobboard.guards import is_job_seeker
from jobboard.models import Resume

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


def validate_upload(file_storage):
    """
    Read the uploaded file into memory and check it, before anything is
    written to storage. Returns (bytes, filename, mime type).
    """
    if file_storage is None or file_storage.filename == "":
        raise BadRequest("No file uploaded. check multipart/form-data")

    if file_storage.mimetype != PDF_MIME_TYPE:
        raise BadRequest("Only PDF files are allowed!")

    data = file_storage.read()
    max_bytes = current_app.config["RESUME_MAX_BYTES"]
    if len(data) > max_bytes:
        raise BadRequest(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB")
    if not data:
        raise BadRequest("Uploaded file is empty")

    filename = secure_filename(file_storage.filename) or "resume.pdf"
    return data, filename, file_storage.mimetype


def upload_resume(user, file_storage):
    """
    Store the PDF and upsert the single Resume record for this candidate.
    The previous file is left in storage when a resume is replaced.
    """
    if not is_job_seeker(user):
        raise Forbidden("Only Job Seekers can upload resumes")

    data, filename, mime_type = validate_upload(file_storage)
    logger.info(f"📄 Resume upload from {user.id}: {filename} ({len(data)} bytes)")

    locator = resume_storage.upload(data, resume_storage.make_public_id(user.id))

    resume = Resume.query.filter_by(candidate_id=user.id).first()
    if resume:
        resume.storage_locator = locator
        resume.file_name = filename
        resume.mime_type = mime_type
        resume.file_size = len(data)
        resume.uploaded_at = datetime.utcnow()
    else:
        resume = Resume(
            candidate_id=user.id,
            storage_locator=locator,
            file_name=filename,
            mime_type=mime_type,
            file_size=len(data),
        )
        db.session.add(resume)

    user.resume = "uploaded"
    db.session.commit()
    return resume


def resume_access_url(user, candidate_id):
    """
    Job Seekers may only read their own resume; Recruiters and Admins may read
    any candidate's.
    """
    if is_job_seeker(user) and user.id != candidate_id:
        raise Forbidden("Not authorized to view this resume")

    resume = Resume.query.filter_by(candidate_id=candidate_id).first()
    if not resume:
        raise NotFound("Resume not found")

    url = resume_storage.signed_url(resume.storage_locator, current_app.config["RESUME_URL_TTL"])
    return url, resume.file_name
