from flask import current_app, g, jsonify
from flask_jwt_extended import (
    create_access_token,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
    unset_jwt_cookies,
)
from sitecontent.domain.exceptions import ConflictError
from sitecontent.domain.invariants.user import assert_credentials_present
from sitecontent.normalizers.content import normalize_success
from sitecontent.normalizers.user import normalize_user
from sitecontent.utils.audit import log_action
from sitecontent.utils.decorators import json_body_required
from .dependencies import user_repository
from . import api_bp


@api_bp.route("/login", methods=["POST"])
@json_body_required
def login():
    data = g.json_body
    username = data.get("username")
    password = data.get("password")

    assert_credentials_present(username, password)

    user = user_repository().authenticate(username, password)
    if not user:
        return jsonify({"error": "Invalid username or password."}), 401

    access_token = create_access_token(identity=user["username"])

    response = jsonify({"success": True, "user": normalize_user(user)})
    set_access_cookies(response, access_token)

    log_action(
        action="auth.login",
        entity_type="user",
        entity_id=user["username"],
        actor=user["username"],
    )
    return response, 200


@api_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify(normalize_success("Logged out."))
    unset_jwt_cookies(response)
    return response, 200


@api_bp.route("/verify-auth", methods=["GET"])
@jwt_required()
def verify_auth():
    return jsonify({"user": {"username": get_jwt_identity()}}), 200


@api_bp.route("/setup", methods=["GET"])
def setup():
    """Create the initial admin account from ADMIN_USERNAME / ADMIN_PASSWORD."""
    username = current_app.config.get("ADMIN_USERNAME")
    password = current_app.config.get("ADMIN_PASSWORD")

    if not username or not password:
        return jsonify({
            "error": "ADMIN_USERNAME and ADMIN_PASSWORD must be set in environment variables."
        }), 500

    users = user_repository()
    if users.exists(username):
        raise ConflictError(
            f"User '{username}' already exists. Setup has already been run."
        )

    users.create(username, password)

    log_action(
        action="user.setup",
        entity_type="user",
        entity_id=username,
    )
    return jsonify(normalize_success(f"Admin user '{username}' created successfully.")), 200
