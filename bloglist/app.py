"""
Flask Application Factory Module

Builds a Bloglist API instance for a given configuration:

    create_app() → Load Config → Configure Logging → Initialize Extensions
                 → Register Blueprints → Register Handlers → Return App

Usage:
    # Development
    app = create_app('development')
    app.run(debug=True)

    # Production (with Gunicorn)
    gunicorn -w 4 -b 0.0.0.0:3003 "bloglist.app:create_app('production')"

    # Testing
    app = create_app('testing')
    test_client = app.test_client()
"""

import logging
import os

from flask import Flask, jsonify, request

from bloglist.config import config
from bloglist.src.extensions import db, jwt, cors
from bloglist.src.api import api_bp
from bloglist.src.services.auth_service import AuthService

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(app):
    """
    Route application and module loggers through one stream handler.

    Module loggers live under the 'bloglist' namespace, so setting that
    logger's level covers services and routes alike.
    """
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('bloglist').setLevel(level)
    app.logger.setLevel(level)


def create_app(config_name=None):
    """
    Application Factory - Creates and configures a Flask application instance.

    Args:
        config_name (str, optional): 'development', 'production' or 'testing'.
            If None, reads FLASK_ENV, defaulting to 'development'.

    Returns:
        Flask: Configured application
    """

    # ========================================================================
    # STEP 1: Create Flask Application and Load Configuration
    # ========================================================================

    app = Flask(__name__)

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app.config.from_object(config[config_name])
    app.json.sort_keys = False

    configure_logging(app)
    app.logger.info("Starting application with '%s' configuration", config_name)


    # ========================================================================
    # STEP 2: Initialize Flask Extensions
    # ========================================================================

    db.init_app(app)
    jwt.init_app(app)

    cors.init_app(app, resources={
        r"/api/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"],
            "supports_credentials": True
        }
    })


    # ========================================================================
    # STEP 3: Register Blueprints and Create Tables
    # ========================================================================

    # /api/blogs, /api/users, /api/login
    app.register_blueprint(api_bp)

    # Production should manage the schema with migrations instead
    with app.app_context():
        if config_name == 'development':
            db.create_all()
            app.logger.info('Database tables created/verified')


    # ========================================================================
    # STEP 4: Application Routes
    # ========================================================================

    @app.route('/health')
    def health_check():
        """Liveness probe, always 200 while the app is running."""
        return jsonify({
            'status': 'healthy',
            'environment': config_name
        }), 200


    # ========================================================================
    # STEP 5: Global Error Handlers
    # ========================================================================

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'unknown endpoint'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """
        Fallback for exceptions that escaped the route handlers.

        Rolls back the session, and never exposes error details to the client.
        """
        db.session.rollback()
        app.logger.error('Internal Server Error: %s', error)
        return jsonify({'error': 'Something went wrong'}), 500


    # ========================================================================
    # STEP 6: JWT Callbacks
    # ========================================================================

    @jwt.user_lookup_loader
    def user_lookup_callback(jwt_header, jwt_payload):
        """Load the User behind a token, for get_current_user() in routes."""
        return AuthService.resolve_identity(jwt_payload.get('sub'))

    @jwt.user_lookup_error_loader
    def user_lookup_error_callback(jwt_header, jwt_payload):
        # Token is well formed but its user id is unknown
        return jsonify({'error': 'token missing or invalid'}), 401

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({'error': 'token expired'}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        """Bad signature, malformed token, or missing identity claim."""
        app.logger.debug('Rejected token: %s', error)
        return jsonify({'error': 'token missing or invalid'}), 401

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        """No Authorization header, or one without the Bearer scheme."""
        return jsonify({'error': 'token missing or invalid'}), 401


    # ========================================================================
    # STEP 7: Request/Response Hooks
    # ========================================================================

    @app.before_request
    def log_request():
        app.logger.debug('%s %s', request.method, request.path)

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-XSS-Protection'] = '1; mode=block'
        return response

    @app.teardown_appcontext
    def shutdown_session(exception=None):
        db.session.remove()


    # ========================================================================
    # STEP 8: CLI Commands
    # ========================================================================

    @app.cli.command('init-db')
    def init_db_command():
        """Create all tables. Safe to run multiple times."""
        db.create_all()
        print('Database initialized successfully')

    @app.cli.command('seed-db')
    def seed_db_command():
        """Seed the database with sample users and blogs (development only)."""
        from bloglist.src.models.user import User
        from bloglist.src.models.blog import Blog

        if db.session.execute(db.select(User)).first():
            print('Database already contains data. Skipping seed.')
            return

        root = User(username='root', name='Superuser')
        root.set_password('sekret')

        mluukkai = User(username='mluukkai', name='Matti Luukkainen')
        mluukkai.set_password('salainen')

        db.session.add_all([root, mluukkai])
        db.session.add_all([
            Blog(title='React patterns', author='Michael Chan',
                 url='https://reactpatterns.com/', likes=7, user=root),
            Blog(title='Go To Statement Considered Harmful', author='Edsger W. Dijkstra',
                 url='http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html',
                 likes=5, user=root),
            Blog(title='Canonical string reduction', author='Edsger W. Dijkstra',
                 url='http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html',
                 likes=12, user=mluukkai),
        ])
        db.session.commit()

        print('Seeded 2 users and 3 blogs')
        print('  Username: root, Password: sekret')
        print('  Username: mluukkai, Password: salainen')

    return app


if __name__ == '__main__':
    # Development server only - use gunicorn in production
    app = create_app('development')
    app.run(host='0.0.0.0', port=3003, debug=True, threaded=True)
