from flask import Flask, jsonify, render_template
from flask_migrate import Migrate

from .extensions import db, cors
from .errors import register_error_handlers

migrate = Migrate()


def create_app(config_object='config.Config'):
    """App factory.

    Database, migrations and CORS are bound here with ``init_app``; the
    SQLAlchemy session is scoped to the app context and removed on teardown.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    migrate.init_app(app, db, directory='alembic')
    origins = [o.strip() for o in (app.config.get('CORS_ORIGIN') or '').split(',') if o.strip()]
    cors.init_app(app, resources={r"/api/*": {"origins": origins}}, supports_credentials=True)

    from . import models  # noqa: F401
    from .api import bp as api_bp
    app.register_blueprint(api_bp)
    register_error_handlers(app)

    if app.config.get('AUTO_CREATE_TABLES'):
        with app.app_context():
            db.create_all()

    @app.get('/')
    def index():
        return render_template('index.html')

    @app.get('/api/health')
    def health():
        return jsonify({"message": "AI Summarizer API is running!"})

    return app
