from flask import Flask, current_app
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from cms.config import Config

# ── Extension instances (created once, initialised in create_app) ──────────
bcrypt = Bcrypt()
login_manager = LoginManager()
limiter = Limiter(key_func=get_remote_address)


class Stores:
    """Filesystem-backed stores shared by every request of one app."""

    def __init__(self, documents, history, credentials):
        self.documents = documents
        self.history = history
        self.credentials = credentials


def create_app(config_class=Config):
    """Application factory — creates and configures the Flask app."""

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialise extensions
    bcrypt.init_app(app)
    login_manager.init_app(app)
    limiter.init_app(app)

    # ── Stores ──────────────────────────────────────────────────────
    from cms.documents import DocumentStore
    from cms.history import RevisionLog
    from cms.users import CredentialStore, User

    documents = DocumentStore(app.config["DATA_FOLDER"], app.config["IMAGE_FOLDER"])
    documents.ensure_folders()
    app.extensions["cms"] = Stores(
        documents=documents,
        history=RevisionLog(app.config["HISTORY_PATH"]),
        credentials=CredentialStore(app.config["USERS_PATH"], bcrypt),
    )

    # ── User loader callback ──────────────────────────────────────────
    @login_manager.user_loader
    def load_user(user_id):
        if current_app.extensions["cms"].credentials.exists(user_id):
            return User(user_id)
        return None

    # ── Register blueprints ─────────────────────────────────────────
    from cms.routes import main
    from cms.user_routes import users_bp

    app.register_blueprint(users_bp)
    app.register_blueprint(main)

    # ── Error handlers ────────────────────────────────────────────────
    from flask import flash, redirect, render_template, url_for

    from cms.errors import DocumentNotFound

    @app.errorhandler(DocumentNotFound)
    def document_not_found(e):
        flash(e.message, "danger")
        return redirect(url_for("main.index"))

    @app.errorhandler(404)
    def not_found(e):
        return render_template("errors/404.html"), 404

    @app.errorhandler(429)
    def rate_limit_exceeded(e):
        return render_template("errors/429.html", retry_after=e.description), 429

    @app.errorhandler(500)
    def internal_error(e):
        app.logger.error(f"Unhandled error: {e}")
        return render_template("errors/500.html"), 500

    # ── CLI commands ──────────────────────────────────────────────────
    import click

    from cms.errors import ValidationError

    @app.cli.command("create-user")
    @click.argument("username")
    @click.argument("password")
    def create_user(username, password):
        """Register a user without going through the sign-up form."""
        try:
            app.extensions["cms"].credentials.register(username, password)
        except ValidationError as e:
            click.echo(f"Error: {e.message}")
            return
        click.echo(f"✓ User '{username}' created.")

    return app
