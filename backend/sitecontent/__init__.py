from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import jwt
from .api import api_bp
from .store.client import init_store
from .errors import register_error_handlers, register_jwt_handlers
from .commands import register_commands
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development", store=None) -> Flask:
    """
    Build the application.

    ``store`` is an optional Redis-compatible client (created with
    ``decode_responses=True``); when omitted one is built from KV_URL.
    """
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    if not app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET must be set to sign session cookies.")

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    jwt.init_app(app)
    init_store(app, store)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)
    register_jwt_handlers()
    register_commands(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/content.yaml", methods=["GET"], endpoint="openapi_content")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "content_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("content_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/content.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Site Content API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
