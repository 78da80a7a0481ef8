# backend/routes/root/root_routes.py

from . import root_bp


# -----------------------------
# HEALTH CHECK
# -----------------------------
@root_bp.get("/")
def home():
    """Plain-text liveness probe used by the hosting platform."""
    return "FarmConnect Backend is Running!", 200, {"Content-Type": "text/plain; charset=utf-8"}
