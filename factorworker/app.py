# factorworker/app.py

from __future__ import annotations
import logging

from flask import Flask

from . import config
from .api import factor_bp

def create_app(queue=None) -> Flask:
    """App factory. Pass an rq Queue to bypass the REDIS_URL connection."""
    logging.basicConfig(level=config.LOG_LEVEL)
    app = Flask(__name__)
    if queue is not None:
        app.extensions["factor_queue"] = queue
    app.register_blueprint(factor_bp)
    return app

if __name__ == "__main__":
    create_app().run("127.0.0.1", 8082, debug=True)
