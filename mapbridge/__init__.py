from flask import Flask, jsonify, request

from mapbridge.config import load_config

API_PATHS = ("/update-map",)


def _is_api(path: str) -> bool:
    return path in API_PATHS


def create_app(test_config=None):
    app = Flask(__name__, static_folder=None)
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)

    # --- Respuestas de error JSON uniformes para la API ---
    @app.errorhandler(404)
    def _json_404(err):
        if _is_api(request.path):
            return jsonify(message="not found"), 404
        return "Not Found", 404

    @app.errorhandler(400)
    def _json_400(err):
        if _is_api(request.path):
            return jsonify(message="bad request"), 400
        return "Bad Request", 400

    @app.errorhandler(405)
    def _json_405(err):
        if _is_api(request.path):
            resp = jsonify(message="method not allowed")
            allow = getattr(err, "valid_methods", None)
            if allow:
                resp.headers["Allow"] = ", ".join(allow)
            return resp, 405
        return "Method Not Allowed", 405

    from mapbridge.routes import api_bp
    from mapbridge.webui import ensure_webui

    app.register_blueprint(api_bp)
    ensure_webui(app)

    app.logger.debug("[app] static root %s, script %s",
                     app.config["ROOT_DIR"], app.config["SCRIPT_PATH"])
    return app
