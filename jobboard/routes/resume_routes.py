from flask import Blueprint, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from jobboard.services.resumes import resume_access_url, upload_resume

resume_bp = Blueprint("resume", __name__)


@resume_bp.route("/upload", methods=["POST"])
@jwt_required()
def upload():
    # multipart field "resume", PDF only
    resume = upload_resume(current_user, request.files.get("resume"))
    return jsonify({
        "success": True,
        "message": "Resume uploaded successfully",
        "resumeId": resume.id,
    }), 201


@resume_bp.route("/<candidate_id>", methods=["GET"])
@jwt_required()
def get_resume(candidate_id):
    url, file_name = resume_access_url(current_user, candidate_id)
    return jsonify({"success": True, "url": url, "fileName": file_name}), 200
