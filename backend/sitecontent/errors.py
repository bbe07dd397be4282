from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from sitecontent.domain.exceptions import ContentAPIError, StoreError
from sitecontent.extensions import jwt

GENERIC_STORE_ERROR = "An internal server error occurred."


def error_response(message, status_code, headers=None):
    response = jsonify({"error": message})
    response.status_code = status_code
    if headers:
        response.headers.extend(headers)
    return response


def register_error_handlers(app):
    @app.errorhandler(StoreError)
    def handle_store_error(error):
        current_app.logger.error("Key-value store failure: %s", error, exc_info=error)
        return error_response(GENERIC_STORE_ERROR, error.status_code)

    @app.errorhandler(ContentAPIError)
    def handle_content_error(error):
        return error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        message = {
            404: "Not Found",
            405: "Method Not Allowed",
        }.get(error.code, error.description)
        headers = None
        valid_methods = getattr(error, "valid_methods", None)
        if error.code == 405 and valid_methods:
            headers = {"Allow": ", ".join(valid_methods)}
        return error_response(message, error.code, headers)


def register_jwt_handlers():
    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response("Authentication required.", 401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response("Invalid or expired token.", 401)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response("Invalid or expired token.", 401)
