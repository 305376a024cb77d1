from flask import Flask, jsonify
from donorhub.config import Config
from donorhub.extensions import db, migrate, jwt, cors

# Import controllers (blueprints) for each module
from donorhub.controllers.donor_controller import donor_bp
from donorhub.controllers.hospital_controller import hospital_bp
from donorhub.controllers.blood_request_controller import blood_request_bp
from donorhub.controllers.statistics_controller import statistics_bp
from donorhub.controllers.auth_controller import auth_bp
from donorhub.seed import seed_command

def create_app(config_object=None):
    """Flask application factory"""
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Without a connection string every store call answers "not configured"
    if app.config.get('SQLALCHEMY_DATABASE_URI'):
        db.init_app(app)
        migrate.init_app(app, db)
    else:
        app.logger.warning('DATABASE_URL is not set; database-backed endpoints will fail')

    jwt.init_app(app)
    cors.init_app(app)  # reads CORS_ORIGINS / CORS_SUPPORTS_CREDENTIALS from config

    # Register Blueprints with appropriate URL prefixes
    app.register_blueprint(statistics_bp, url_prefix='/api')  # /api/statistics, /api/dashboard-stats, /api/blood-inventory
    app.register_blueprint(donor_bp, url_prefix='/api/donors')
    app.register_blueprint(hospital_bp, url_prefix='/api/hospitals')
    app.register_blueprint(blood_request_bp, url_prefix='/api/blood-requests')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    app.cli.add_command(seed_command)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({'error': 'Internal server error'}), 500

    return app
