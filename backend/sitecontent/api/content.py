# sitecontent/api/content.py
from flask import current_app, g, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from sitecontent.application.content.get_content import get_public_content
from sitecontent.application.content.revert_content import revert_content
from sitecontent.application.content.update_content import update_content
from sitecontent.domain.invariants.content import (
    assert_gallery_images,
    assert_history_timestamp,
    assert_page_content,
)
from sitecontent.normalizers.content import (
    normalize_content,
    normalize_history,
    normalize_success,
)
from sitecontent.utils.decorators import json_body_required
from .dependencies import content_repository, history_manager
from . import api_bp

PUBLIC_CACHE_CONTROL = "s-maxage=60, stale-while-revalidate=300"


@api_bp.route("/content", methods=["GET"])
def get_content():
    content = get_public_content(repository=content_repository())

    response = jsonify(normalize_content(content))
    response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
    return response, 200


@api_bp.route("/update-content", methods=["POST"])
@jwt_required()
@json_body_required
def post_update_content():
    data = g.json_body
    page_content = data.get("pageContent")
    gallery_images = data.get("galleryImages")

    assert_page_content(page_content)
    assert_gallery_images(gallery_images)

    result = update_content(
        repository=content_repository(),
        history=history_manager(),
        page_content=page_content,
        gallery_images=gallery_images,
        actor=get_jwt_identity(),
    )

    current_app.logger.info(
        "Content updated (snapshot=%s)", result["snapshot"] or "none"
    )
    return jsonify(normalize_success("Content saved successfully.")), 200


@api_bp.route("/content-history", methods=["GET"])
@jwt_required()
def get_content_history():
    return jsonify(normalize_history(history_manager().list_history())), 200


@api_bp.route("/revert-content", methods=["POST"])
@jwt_required()
@json_body_required
def post_revert_content():
    timestamp = g.json_body.get("timestamp")

    assert_history_timestamp(timestamp)

    revert_content(
        repository=content_repository(),
        history=history_manager(),
        timestamp=timestamp,
        actor=get_jwt_identity(),
    )

    return jsonify(
        normalize_success(f"Content restored to version from {timestamp}.")
    ), 200
