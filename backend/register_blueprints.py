"""
Centralized Blueprint Registration
All blueprints MUST be registered inside register_all_blueprints(app)
"""

def register_all_blueprints(app):

    # Root
    from backend.routes.root import root_bp
    app.register_blueprint(root_bp)

    # Marketplace modules
    from backend.routes.marketplace.offer_routes import offer_bp
    from backend.routes.marketplace.crop_routes import crop_bp
    from backend.routes.marketplace.buyer_need_routes import buyer_need_bp
    from backend.routes.marketplace.notification_routes import notification_bp

    app.register_blueprint(offer_bp)
    app.register_blueprint(crop_bp)
    app.register_blueprint(buyer_need_bp)
    app.register_blueprint(notification_bp)

    print("✓ All blueprints registered")
