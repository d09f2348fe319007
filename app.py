import logging
import os

from flask import Flask, jsonify, request
from sqlalchemy import text
from sqlalchemy.engine import URL, make_url

from models import db
from repository import WeatherRepository
from seed import seed_if_empty

log = logging.getLogger(__name__)

# Helper: resolve the database URL from the environment
def _database_uri():
    """DATABASE_URL wins; otherwise compose one from DB_HOST/DB_USER/... or fall back to local SQLite."""
    database_url = os.environ.get("DATABASE_URL", "").strip()
    if database_url:
        return database_url

    host = os.environ.get("DB_HOST", "").strip()
    if not host:
        return "sqlite:///weather.db"

    port = os.environ.get("DB_PORT", "").strip()
    url = URL.create(
        os.environ.get("DB_DRIVER", "mysql+pymysql"),
        username=os.environ.get("DB_USER") or None,
        password=os.environ.get("DB_PASSWORD") or None,
        host=host,
        port=int(port) if port else None,
        database=os.environ.get("DB_NAME") or None,
    )
    return url.render_as_string(hide_password=False)

def _env_flag(name, default="true"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")

# App factory: sets configuration, initializes and seeds the database, and registers routes.
def create_app(config=None):
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret")
    app.config["SQLALCHEMY_DATABASE_URI"] = _database_uri()
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SEED_DATA"] = _env_flag("SEED_DATA")
    if config:
        app.config.update(config)

    log.info(
        "Using database %s",
        make_url(app.config["SQLALCHEMY_DATABASE_URI"]).render_as_string(hide_password=True),
    )

    db.init_app(app)

    # A database that cannot be reached fails here, before any route is served.
    with app.app_context():
        db.create_all()
        if app.config["SEED_DATA"]:
            seed_if_empty()

    repository = WeatherRepository()

    # Looks up one city; an unknown city is an empty 200 response.
    @app.route("/weather/city", methods=["GET"])
    def weather_by_city():
        city = request.args["name"]
        record = repository.get(city)
        if record is None:
            return "", 200
        return jsonify(record.to_dict())

    @app.route("/healthz", methods=["GET"])
    def healthz():
        db.session.execute(text("SELECT 1"))
        return jsonify({"status": "ok"})

    return app

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "8080")))
