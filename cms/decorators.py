from functools import wraps

from flask import flash, redirect, url_for
from flask_login import current_user


def is_signed_in() -> bool:
    return current_user.is_authenticated


def signin_required(f):
    """Decorator that bounces anonymous visitors back to the index with a
    failure message instead of Flask-Login's sign-in redirect.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_signed_in():
            flash("You must be signed in to do that", "danger")
            return redirect(url_for("main.index"))
        return f(*args, **kwargs)

    return decorated_function
