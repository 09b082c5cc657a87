"""
Flask Extensions Initialization.
Extensions are initialized here and bound to the app in app.py.
This pattern allows extensions to be imported by models before app creation.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_cors import CORS

# Database ORM, bound with db.init_app(app)
db = SQLAlchemy()

# Bearer tokens for login and blog ownership
jwt = JWTManager()

# Cross-Origin Resource Sharing for the frontend
cors = CORS()
