from __future__ import annotations

import logging
import os

from flask import Flask, g, render_template

from db import close_db, current_env, get_db
from views.browse import init_browse_views


# ----------------------------------------
# Logging
# ----------------------------------------
def configure_logging(app):
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(level)


# ----------------------------------------
# Flask app
# ----------------------------------------
def create_app(get_db_func=None, config: dict | None = None) -> Flask:
    """
    get_db_func / config are for tests (fake DB, TESTING=True...).
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "browse-dev")
    app.config["JSON_AS_ASCII"] = False
    app.config["APP_VERSION"] = os.getenv("RAILWAY_GIT_COMMIT_SHA", "dev")[:7]
    app.config["APP_ENV"] = current_env()
    if config:
        app.config.update(config)

    configure_logging(app)

    @app.context_processor
    def inject_env():
        return {"env": app.config["APP_ENV"]}

    @app.before_request
    def inject_version():
        g.app_version = app.config["APP_VERSION"]

    @app.teardown_appcontext
    def teardown_db(exc):
        close_db(exc)

    @app.route("/")
    def index():
        return render_template("home.html")

    # Register views (blueprint-style init)
    init_browse_views(app, get_db_func or get_db)

    app.logger.info("browse app ready (env=%s, version=%s)", app.config["APP_ENV"], app.config["APP_VERSION"])
    return app


# ----------------------------------------
# Run
# ----------------------------------------
if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    debug = os.environ.get("FLASK_DEBUG", "0") == "1"
    create_app().run(host="0.0.0.0", port=port, debug=debug)
