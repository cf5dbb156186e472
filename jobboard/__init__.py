import logging

from flask import Flask, jsonify
from pymysql import connect
from sqlalchemy.engine import make_url

from config import Config
from .extensions import bcrypt, cors, db, identity_provider, jwt, migrate, resume_storage
from .errors import register_error_handlers
from .models import User
from .routes.auth_routes import auth_bp
from .routes.job_routes import jobs_bp
from .routes.resume_routes import resume_bp
from .cli import create_admin, init_db

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Allow CORS from the React client
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CLIENT_ORIGIN"]}}, supports_credentials=True)

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("mysql"):
        create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    bcrypt.init_app(app)
    identity_provider.init_app(app)
    resume_storage.init_app(app)

    register_jwt_callbacks()
    register_error_handlers(app)

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(jobs_bp, url_prefix="/api/jobs")
    app.register_blueprint(resume_bp, url_prefix="/api/resume")

    @app.route("/")
    def index():
        return "API is running..."

    app.cli.add_command(init_db)
    app.cli.add_command(create_admin)

    return app


def configure_logging(app):
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("jobboard").setLevel(app.config.get("LOG_LEVEL", "INFO"))


def register_jwt_callbacks():
    @jwt.user_lookup_loader
    def load_user(_jwt_header, jwt_data):
        return db.session.get(User, jwt_data["sub"])

    @jwt.user_lookup_error_loader
    def user_not_found(_jwt_header, _jwt_data):
        return jsonify({"message": "User not found"}), 404

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"message": "Not authorized, no token"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"message": "Not authorized, token failed"}), 401

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_data):
        return jsonify({"message": "Not authorized, token expired"}), 401


def create_database_if_not_exists(database_uri):
    url = make_url(database_uri)

    logger.info(f"🔧 Ensuring database '{url.database}' exists on {url.host}:{url.port or 3306}")

    conn = connect(
        host=url.host,
        port=url.port or 3306,
        user=url.username,
        password=url.password or "",
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
