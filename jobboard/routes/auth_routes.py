import logging
import traceback

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import current_user, jwt_required

from jobboard.guards import admin_required
from jobboard.models import User
from jobboard.schemas import (
    GoogleLoginRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserStatusUpdate,
    parse,
)
from jobboard.serializers import user_public_dict, user_to_dict
from jobboard.services.auth import AuthService
from jobboard.services.identity import IdentityError

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = parse(RegisterRequest, request.get_json(silent=True))
    user, token = AuthService.register(data)
    return jsonify({"user": user_public_dict(user), "token": token}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    credentials = parse(LoginRequest, request.get_json(silent=True))
    user, token = AuthService.authenticate_user(credentials.email, credentials.password)
    return jsonify({"user": user_public_dict(user), "token": token}), 200


@auth_bp.route("/google", methods=["POST"])
def google_login():
    data = parse(GoogleLoginRequest, request.get_json(silent=True))

    try:
        user, token, created = AuthService.federated_login(data.token, data.role)
    except IdentityError as e:
        logger.error(f"❌ Google auth error: {e}")
        body = {"message": "Google authentication failed", "error": str(e)}
        if current_app.debug:
            body["stack"] = traceback.format_exc()
        return jsonify(body), 500

    return jsonify({
        "user": user_public_dict(user, with_avatar=True),
        "token": token,
    }), 201 if created else 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify({"user": user_to_dict(current_user)}), 200


@auth_bp.route("/profile", methods=["PUT"])
@jwt_required()
def update_profile():
    data = parse(ProfileUpdateRequest, request.get_json(silent=True))
    user, token = AuthService.update_profile(current_user, data)
    return jsonify({
        "user": user_public_dict(user, with_profile=True),
        "token": token,
    }), 200


# ==================== ADMIN ====================

@auth_bp.route("/users", methods=["GET"])
@admin_required
def list_users():
    users = User.query.order_by(User.created_at.desc()).all()
    return jsonify({"success": True, "users": [user_to_dict(u) for u in users]}), 200


@auth_bp.route("/users/<user_id>", methods=["PUT"])
@admin_required
def set_user_status(user_id):
    data = parse(UserStatusUpdate, request.get_json(silent=True))
    user = AuthService.set_status(user_id, data.status)
    return jsonify({"success": True, "user": user_to_dict(user)}), 200


@auth_bp.route("/users/<user_id>", methods=["DELETE"])
@admin_required
def delete_user(user_id):
    AuthService.delete_user(user_id)
    return jsonify({"success": True, "message": "User removed"}), 200
