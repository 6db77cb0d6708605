from flask import Flask
from werkzeug.exceptions import HTTPException
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, scoped_session
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import json
import os
import pathlib

from .errors import ApiError
from .store import RecordStore

load_dotenv()

DEFAULT_OPENAPI_OUTPUT = str(pathlib.Path(__file__).resolve().parent / 'swagger-output.json')


def create_app(config: Optional[Dict[str, Any]] = None):
    app = Flask(__name__)

    app.config['DATABASE_URL'] = os.getenv('DATABASE_URL', 'sqlite:///dev.db')
    app.config['PORT'] = int(os.getenv('PORT', '5001'))
    app.config['OPENAPI_OUTPUT'] = os.getenv('OPENAPI_OUTPUT', DEFAULT_OPENAPI_OUTPUT)
    # keep camelCase payload keys in declaration order
    app.json.sort_keys = False

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    # Database
    db_url = app.config['DATABASE_URL']
    if db_url.endswith(':memory:'):
        # Ensure a single shared in-memory SQLite database across all sessions
        db_engine = create_engine(
            db_url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_engine = create_engine(db_url, echo=False, future=True)
    session_factory = scoped_session(sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False))
    store = RecordStore(session_factory)
    app.extensions['store'] = store

    @app.teardown_appcontext
    def remove_session(exc):  # type: ignore
        store.remove()

    from .routes.benefits import create_benefits_blueprint
    from .routes.employees import create_employees_blueprint
    from .routes.applications import create_applications_blueprint
    app.register_blueprint(create_benefits_blueprint(store), url_prefix='/benefits')
    app.register_blueprint(create_employees_blueprint(store), url_prefix='/employees')
    app.register_blueprint(create_applications_blueprint(store), url_prefix='/applications')

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):  # type: ignore
        return e.to_payload(), e.status

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            return {'message': e.description}, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {'message': 'Unexpected error'}, 500

    @app.route('/openapi.json')
    def openapi_spec():
        # Generated offline by scripts/generate_spec.py, never at startup
        path = pathlib.Path(app.config['OPENAPI_OUTPUT'])
        if not path.is_file():
            app.logger.warning('OpenAPI artifact missing at %s', path)
            return {'message': 'API documentation has not been generated.'}, 404
        return json.loads(path.read_text(encoding='utf-8'))

    @app.route('/api-docs')
    def docs_index():
        # Lightweight HTML referencing Redoc CDN (no local install) for quick browsing
        return (
            "<!DOCTYPE html><html><head><title>Leave API Docs</title>"
            "<link rel=\"stylesheet\" href=\"https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.css\" />"
            "</head><body><redoc spec-url='/openapi.json'></redoc>"
            "<script src='https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js'></script>"
            "</body></html>"
        )

    return app
