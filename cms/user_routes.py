from flask import (
    Blueprint,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    url_for,
)
from flask_login import login_user, logout_user

from cms import limiter
from cms.errors import ValidationError
from cms.users import User

users_bp = Blueprint("users", __name__, url_prefix="/users")


def _credentials():
    return current_app.extensions["cms"].credentials


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  SIGN IN / SIGN OUT                                                ║
# ╚══════════════════════════════════════════════════════════════════════╝

@users_bp.route("/signin")
def signin_form():
    return render_template("signin.html")


@users_bp.route("/signin", methods=["POST"])
@limiter.limit("10 per minute")
def signin():
    username = request.form.get("username", "")
    password = request.form.get("password", "")

    if _credentials().authenticate(username, password):
        login_user(User(username))
        flash("Welcome!", "success")
        return redirect(url_for("main.index"))

    current_app.logger.warning(f"Failed sign-in for {username!r}")
    flash("Invalid credentials", "danger")
    return render_template("signin.html", username=username), 422


@users_bp.route("/signout", methods=["POST"])
def signout():
    logout_user()
    flash("You have been signed out", "success")
    return redirect(url_for("main.index"))


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  SIGN UP                                                           ║
# ╚══════════════════════════════════════════════════════════════════════╝

@users_bp.route("/signup", methods=["POST"])
@limiter.limit("5 per minute")
def signup():
    username = request.form.get("signup_username", "")
    password = request.form.get("password", "")

    try:
        _credentials().register(username, password)
    except ValidationError as e:
        flash(e.message, "danger")
        return render_template("signin.html", signup_username=username), 422

    login_user(User(username))
    flash(f"Welcome to CMS, {username}!", "success")
    return redirect(url_for("main.index"))
