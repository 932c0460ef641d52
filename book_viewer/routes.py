from flask import Blueprint, current_app, redirect, render_template, request, url_for

from book_viewer.search import Book, ChapterNotFound, search

main = Blueprint("book", __name__)


def _book():
    return Book(current_app.config["BOOK_DATA_FOLDER"])


@main.route("/")
def home():
    return render_template(
        "home.html",
        title=current_app.config["BOOK_TITLE"],
        contents=_book().contents(),
    )


@main.route("/search")
def search_book():
    query = request.args.get("query", "")
    book = _book()
    return render_template(
        "search.html",
        query=query,
        contents=book.contents(),
        results=search(query, book.chapters()),
    )


@main.route("/chapters/<number>")
def chapter(number):
    book = _book()
    try:
        number = int(number)
        name, text = book.chapter(number)
    except (ValueError, ChapterNotFound):
        current_app.logger.info(f"No chapter {number!r}, redirecting home")
        return redirect(url_for("book.home"))

    return render_template(
        "chapter.html",
        title=f"Chapter {number}: {name}",
        contents=book.contents(),
        chapter=text,
    )
