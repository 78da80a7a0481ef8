# app.py (Render + Local working)

from flask import Flask
from flask_cors import CORS

from backend.app_config import load_config
from backend.errors import register_error_handlers
from backend.mongo import init_mongo
from backend.register_blueprints import register_all_blueprints


def create_app(config_overrides=None):
    app = Flask(__name__)

    # -------------------------
    # Config
    # -------------------------
    load_config(app, config_overrides)

    CORS(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # -------------------------
    # Mongo
    # -------------------------
    init_mongo(app)

    # -------------------------
    # Errors & Blueprints
    # -------------------------
    register_error_handlers(app)
    register_all_blueprints(app)

    return app


# Local run only
if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=True)
