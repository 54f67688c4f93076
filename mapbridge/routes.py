from flask import Blueprint, current_app, jsonify, request

from mapbridge.errors import BadInput, ScriptError
from mapbridge.services.map_service import update_from_body
from mapbridge.services.patcher import MarkerPair

api_bp = Blueprint("api", __name__)


@api_bp.post("/update-map")
def update_map_view():
    """
    Reemplaza la región stage1 de GameManager.lua con ``mapData``.
    - 200 {message} si se escribió.
    - 400 {message} si el cuerpo no trae mapData como string.
    - 500 {message} en error de lectura, marcadores o escritura.
    """
    cfg = current_app.config
    markers = MarkerPair(cfg["START_TAG"], cfg["END_TAG"])
    try:
        update_from_body(request.get_json(silent=True), cfg["SCRIPT_PATH"], markers)
    except BadInput as exc:
        current_app.logger.info("[update-map] bad input: %s", exc)
        return jsonify(message=str(exc)), 400
    except ScriptError as exc:
        return jsonify(message=exc.message), 500
    return jsonify(message="Map updated successfully"), 200
