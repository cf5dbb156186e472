# jobboard/routes/job_routes.py
from flask import Blueprint, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from jobboard.guards import roles_required
from jobboard.models import Role
from jobboard.schemas import (
    ApplicationUpdateRequest,
    ApplyRequest,
    JobCreateRequest,
    JobFilters,
    parse,
)
from jobboard.serializers import (
    application_to_dict,
    job_to_dict,
    my_application_dict,
    recruiter_application_dict,
)
from jobboard.services import applications as ledger
from jobboard.services import jobs as catalog

jobs_bp = Blueprint("jobs", __name__)

recruiter_required = roles_required(Role.RECRUITER, Role.ADMIN)


# ==================== JOBS ====================

@jobs_bp.route("/", methods=["GET"], strict_slashes=False)
def list_jobs():
    """Public job search."""
    filters = parse(JobFilters, request.args.to_dict())
    jobs = catalog.list_jobs(filters)
    return jsonify({"success": True, "jobs": [job_to_dict(j) for j in jobs], "total": len(jobs)}), 200


@jobs_bp.route("/my-jobs", methods=["GET"])
@recruiter_required
def my_jobs():
    jobs = catalog.list_jobs_posted_by(current_user)
    return jsonify({"success": True, "jobs": [job_to_dict(j) for j in jobs], "total": len(jobs)}), 200


@jobs_bp.route("/stats", methods=["GET"])
@jwt_required()
def stats():
    return jsonify({"success": True, "stats": catalog.dashboard_stats(current_user)}), 200


@jobs_bp.route("/", methods=["POST"], strict_slashes=False)
@recruiter_required
def create_job():
    data = parse(JobCreateRequest, request.get_json(silent=True))
    job = catalog.create_job(current_user, data)
    return jsonify({"success": True, "job": job_to_dict(job)}), 201


@jobs_bp.route("/<job_id>", methods=["DELETE"])
@jwt_required()
def delete_job(job_id):
    catalog.delete_job(current_user, job_id)
    return jsonify({"success": True, "message": "Job removed"}), 200


# ==================== APPLICATIONS ====================

@jobs_bp.route("/<job_id>/apply", methods=["POST"])
@jwt_required()
def apply(job_id):
    data = parse(ApplyRequest, request.get_json(silent=True) or request.form.to_dict())
    application = ledger.apply_to_job(current_user, job_id, data)
    return jsonify({"success": True, "application": application_to_dict(application)}), 201


@jobs_bp.route("/my-applications", methods=["GET"])
@jwt_required()
def my_applications():
    applications = ledger.applications_for_user(current_user)
    return jsonify({"success": True, "applications": [my_application_dict(a) for a in applications]}), 200


@jobs_bp.route("/applications/all", methods=["GET"])
@recruiter_required
def all_applications():
    applications = ledger.applications_for_recruiter(current_user)
    return jsonify({
        "success": True,
        "applications": [recruiter_application_dict(a, include_job=True) for a in applications],
    }), 200


@jobs_bp.route("/<job_id>/applications", methods=["GET"])
@jwt_required()
def job_applications(job_id):
    applications = ledger.applications_for_job(current_user, job_id)
    return jsonify({"success": True, "applications": [recruiter_application_dict(a) for a in applications]}), 200


@jobs_bp.route("/applications/<application_id>", methods=["PUT"])
@jwt_required()
def update_application(application_id):
    data = parse(ApplicationUpdateRequest, request.get_json(silent=True))
    application = ledger.update_application(current_user, application_id, data)
    return jsonify({"success": True, "application": application_to_dict(application)}), 200


# ==================== SAVED JOBS ====================

@jobs_bp.route("/<job_id>/save", methods=["POST"])
@jwt_required()
def save_job(job_id):
    saved = ledger.save_job(current_user, job_id)
    return jsonify({"success": True, "savedJobs": [j.id for j in saved]}), 200


@jobs_bp.route("/<job_id>/unsave", methods=["POST"])
@jwt_required()
def unsave_job(job_id):
    saved = ledger.unsave_job(current_user, job_id)
    return jsonify({"success": True, "savedJobs": [j.id for j in saved]}), 200


@jobs_bp.route("/saved/all", methods=["GET"])
@jwt_required()
def saved_jobs():
    jobs = ledger.saved_jobs_for(current_user)
    return jsonify({"success": True, "jobs": [job_to_dict(j) for j in jobs]}), 200
