"""Flask application factory for the vidclip JSON API."""

from flask import Flask, jsonify

from vidclip.config import ClipperConfig


def create_app(config: ClipperConfig | None = None) -> Flask:
    app = Flask(__name__)
    app.config["CLIPPER"] = config or ClipperConfig()

    from vidclip.web.routes import bp
    app.register_blueprint(bp)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "not_found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "method_not_allowed"}), 405

    return app
