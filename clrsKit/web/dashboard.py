import os

from flask import Flask, jsonify
from flask_cors import CORS

from clrsKit.web.api import api_bp


def create_app() -> Flask:
    app = Flask(__name__)

    # CORS: allow all in dev; restrict via CORS_ORIGINS in prod
    origins_env = os.getenv('CORS_ORIGINS') or '*'
    origins = [o.strip() for o in origins_env.split(',')] if origins_env != '*' else '*'
    CORS(app, resources={r"/api/*": {"origins": origins}})

    app.register_blueprint(api_bp, url_prefix='/api')

    @app.get('/')
    def root():
        return jsonify({
            "ok": True,
            "msg": "clrsKit API is running",
            "endpoints": [
                "/api/health",
                "/api/config",
                "/api/algorithms",
                "/api/sort",
                "/api/max-subarray",
                "/api/benchmark",
            ]
        })

    return app


app = create_app()
