from flask import Flask

from book_viewer.config import Config


def create_app(config_class=Config):
    """Application factory for the book viewer."""

    app = Flask(__name__)
    app.config.from_object(config_class)

    from book_viewer.search import highlight, in_paragraphs

    app.add_template_filter(in_paragraphs)
    app.add_template_filter(highlight)

    from book_viewer.routes import main

    app.register_blueprint(main)

    return app
