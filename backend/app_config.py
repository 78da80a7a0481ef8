# backend/app_config.py

import logging
import os


def load_config(app, overrides=None):
    """
    Load all Flask configuration in a clean centralized way.
    Values passed in ``overrides`` win over environment variables.
    """
    # ------------------------------
    # Mongo
    # ------------------------------
    app.config["MONGO_URI"] = os.getenv(
        "MONGO_URI",
        "mongodb://localhost:27017/farmconnect"
    )
    app.config["DISABLE_MONGO"] = os.getenv("DISABLE_MONGO", "0") == "1"

    # ------------------------------
    # HTTP
    # ------------------------------
    app.config["CORS_ORIGINS"] = os.getenv("CORS_ORIGINS", "*")
    app.config["PORT"] = int(os.getenv("PORT", "5001"))

    # ------------------------------
    # Security Keys
    # ------------------------------
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", os.urandom(24))

    # ------------------------------
    # Logging
    # ------------------------------
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO").upper()

    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    print("✓ Config Loaded Successfully")
