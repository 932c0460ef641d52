from flask import (
    Blueprint,
    Response,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    send_from_directory,
    url_for,
)
from markupsafe import Markup

from cms.decorators import signin_required
from cms.documents import (
    IMAGE_EXTENSIONS,
    TEXT_EXTENSIONS,
    RenderKind,
    render_markdown,
)
from cms.errors import DocumentNotFound, ValidationError

main = Blueprint("main", __name__)


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  HELPERS                                                           ║
# ╚══════════════════════════════════════════════════════════════════════╝

def _stores():
    return current_app.extensions["cms"]


def _render_new(status=200):
    return (
        render_template(
            "new.html",
            text_extensions=TEXT_EXTENSIONS,
            image_extensions=IMAGE_EXTENSIONS,
        ),
        status,
    )


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  INDEX                                                             ║
# ╚══════════════════════════════════════════════════════════════════════╝

@main.route("/")
def index():
    stores = _stores()
    return render_template(
        "index.html",
        documents=stores.documents.list_documents(),
        with_history=set(stores.history.documents()),
    )


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  CREATE / UPLOAD                                                   ║
# ╚══════════════════════════════════════════════════════════════════════╝

@main.route("/new")
@signin_required
def new_document():
    return _render_new()


@main.route("/new", methods=["POST"])
@signin_required
def create_document():
    file_name = request.form.get("file_name", "")

    try:
        _stores().documents.create(file_name)
    except ValidationError as e:
        current_app.logger.warning(f"Rejected document name {file_name!r}: {e.message}")
        flash(e.message, "danger")
        return _render_new(422)

    flash(f"{file_name} was created", "success")
    return redirect(url_for("main.index"))


@main.route("/upload", methods=["POST"])
@signin_required
def upload():
    file = request.files.get("file")

    if not file or file.filename == "":
        flash("No file selected.", "warning")
        return redirect(url_for("main.index"))

    try:
        name = _stores().documents.upload(file.filename, file.stream)
    except ValidationError as e:
        flash(e.message, "danger")
        return redirect(url_for("main.index"))

    flash(f"{name} uploaded successfully", "success")
    return redirect(url_for("main.index"))


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  VIEW                                                              ║
# ╚══════════════════════════════════════════════════════════════════════╝

@main.route("/<file_name>")
def view_document(file_name):
    documents = _stores().documents
    kind = documents.render_kind(file_name)

    if kind is RenderKind.PLAIN_TEXT:
        return Response(documents.read(file_name), mimetype="text/plain")

    if kind is RenderKind.MARKDOWN:
        html = render_markdown(documents.read_text(file_name))
        return render_template("markdown.html", file_name=file_name, html=Markup(html))

    if not documents.exists(file_name):
        raise DocumentNotFound(file_name)
    return render_template("image.html", file_name=file_name)


@main.route("/images/<file_name>")
def image_file(file_name):
    return send_from_directory(_stores().documents.image_folder, file_name)


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  EDIT  (records a revision on every save)                          ║
# ╚══════════════════════════════════════════════════════════════════════╝

@main.route("/<file_name>/edit")
@signin_required
def edit_document(file_name):
    documents = _stores().documents

    if documents.render_kind(file_name) is RenderKind.IMAGE:
        flash(f"{file_name} cannot be edited", "warning")
        return redirect(url_for("main.index"))

    content = documents.read_text(file_name)
    return render_template("edit.html", file_name=file_name, content=content)


@main.route("/<file_name>/edit", methods=["POST"])
@signin_required
def update_document(file_name):
    stores = _stores()
    content = request.form.get("content", "")

    if not stores.documents.exists(file_name):
        raise DocumentNotFound(file_name)
    if stores.documents.render_kind(file_name) is RenderKind.IMAGE:
        flash(f"{file_name} cannot be edited", "warning")
        return redirect(url_for("main.index"))

    stores.documents.write(file_name, content)
    stores.history.record(file_name, content)
    current_app.logger.info(f"{file_name} updated")

    flash(f"{file_name} has been updated", "success")
    return redirect(url_for("main.index"))


@main.route("/<file_name>/history")
@signin_required
def document_history(file_name):
    stores = _stores()
    return render_template(
        "history.html",
        file_name=file_name,
        revisions=stores.history.history_for(file_name),
    )


# ╔══════════════════════════════════════════════════════════════════════╗
# ║  DELETE / DUPLICATE                                                ║
# ╚══════════════════════════════════════════════════════════════════════╝

@main.route("/<file_name>/delete", methods=["POST"])
@signin_required
def delete_document(file_name):
    # Revisions are kept; a document re-created under the same name
    # picks its old history back up.
    _stores().documents.delete(file_name)
    flash(f"{file_name} was deleted", "success")
    return redirect(url_for("main.index"))


@main.route("/<file_name>/duplicate", methods=["POST"])
@signin_required
def duplicate_document(file_name):
    _stores().documents.duplicate(file_name)
    flash(f"{file_name} was duplicated", "success")
    return redirect(url_for("main.index"))
