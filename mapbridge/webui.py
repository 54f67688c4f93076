from flask import Blueprint, abort, current_app, send_from_directory
from pathlib import Path

webui = Blueprint("webui", __name__)


def _root() -> Path:
    return Path(current_app.config["ROOT_DIR"])


@webui.get("/")
def index():
    root = _root()
    name = current_app.config["INDEX_FILE"]
    if not (root / name).is_file():
        current_app.logger.warning("[webui] %s no encontrado en %s", name, root)
        abort(404)
    return send_from_directory(root, name)


@webui.get("/<path:path>")
def static_proxy(path: str):
    # send_from_directory rechaza rutas fuera de ROOT_DIR (404)
    return send_from_directory(_root(), path)


def ensure_webui(app):
    """Idempotente: registra el blueprint sólo si falta."""
    if "webui.index" not in app.view_functions:
        app.register_blueprint(webui)
