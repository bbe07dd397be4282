from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from sitecontent.domain.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from sitecontent.domain.invariants.user import assert_new_user
from sitecontent.normalizers.content import normalize_success
from sitecontent.normalizers.user import normalize_user_list
from sitecontent.utils.audit import log_action
from sitecontent.utils.decorators import json_body_required
from .dependencies import user_repository
from . import api_bp


@api_bp.route("/users", methods=["GET"])
@jwt_required()
def list_users():
    return jsonify(normalize_user_list(user_repository().list_usernames())), 200


@api_bp.route("/users/create", methods=["POST"])
@jwt_required()
@json_body_required
def create_user():
    data = g.json_body
    username = data.get("username")
    password = data.get("password")

    assert_new_user(username, password)

    users = user_repository()
    if users.exists(username):
        raise ConflictError("Username is already in use.")

    users.create(username, password)

    log_action(
        action="user.create",
        entity_type="user",
        entity_id=username,
        actor=get_jwt_identity(),
    )
    return jsonify(normalize_success(f"User '{username}' created.")), 201


@api_bp.route("/users/delete", methods=["POST"])
@jwt_required()
@json_body_required
def delete_user():
    current_user = get_jwt_identity()
    username = g.json_body.get("username")

    if not username or not isinstance(username, str):
        raise ValidationError("Username is required.")

    if username == current_user:
        raise ForbiddenError("You cannot delete your own account.")

    if not user_repository().delete(username):
        raise NotFoundError(f"User '{username}' not found.")

    log_action(
        action="user.delete",
        entity_type="user",
        entity_id=username,
        actor=current_user,
    )
    return jsonify(normalize_success(f"User '{username}' deleted.")), 200
