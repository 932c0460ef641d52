# WSGI entry points
# ──────────────────
# Point your WSGI server at ``wsgi:application`` for the CMS or
# ``wsgi:book_application`` for the book viewer, e.g.
#   gunicorn wsgi:application

import os

# Load environment variables from .env before the config classes are read
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))

from book_viewer import create_app as create_book_app  # noqa: E402
from cms import create_app  # noqa: E402

application = create_app()
book_application = create_book_app()
