from flask import Blueprint

# Create the API blueprint
api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import users
from . import content
