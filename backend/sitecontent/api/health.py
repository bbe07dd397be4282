from flask import current_app, jsonify
from sitecontent.domain.exceptions import StoreError
from sitecontent.store.client import get_store
from . import api_bp


@api_bp.route("/health", methods=["GET"])
def health_check():
    try:
        store_status = "ok" if get_store().ping() else "unavailable"
    except StoreError as exc:
        current_app.logger.warning("Health check could not reach the store: %s", exc)
        store_status = "unavailable"

    status_code = 200 if store_status == "ok" else 503
    return jsonify({
        "status": "ok" if status_code == 200 else "degraded",
        "service": current_app.config["SERVICE_NAME"],
        "store": store_status,
    }), status_code
