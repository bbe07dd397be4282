from functools import wraps
from flask import g, request
from sitecontent.domain.exceptions import ValidationError


def json_body_required(fn):
    """Parse the request body into g.json_body, rejecting anything but an object."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Invalid request body. Expected a JSON object.")

        g.json_body = data
        return fn(*args, **kwargs)
    return wrapper
