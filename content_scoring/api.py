"""HTTP API for the content scoring engine."""

import hashlib
import json
import re
import threading
import time
from typing import Any, Dict, List, Optional, Tuple

import structlog
from cachetools import TTLCache
from flask import Flask, jsonify, request
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PayloadError
from werkzeug.serving import make_server

from . import __version__
from .config import ServiceConfig
from .errors import BaseError, ValidationError
from .metrics import record_analysis, record_error
from .scoring.engine import SEOScoringEngine

logger = structlog.get_logger(__name__)

server = None

SNAKE_SEGMENT_RE = re.compile(r"_([a-z0-9])")


def camelize(value: Any) -> Any:
    """Recursively convert snake_case dictionary keys to camelCase."""
    if isinstance(value, dict):
        return {
            SNAKE_SEGMENT_RE.sub(lambda m: m.group(1).upper(), key): camelize(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [camelize(item) for item in value]
    return value


class AnalyzeRequest(BaseModel):
    """Body of ``POST /seo/analyze``."""

    model_config = ConfigDict(populate_by_name=True)

    content: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    corpus: Optional[List[str]] = None
    cache_key: Optional[str] = Field(default=None, alias="cacheKey")


def parse_analyze_request(payload: Any, max_content_length: int) -> AnalyzeRequest:
    """Validate a request body.

    Raises:
        ValidationError: If the body is not an object, or content or metadata is missing
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        body = AnalyzeRequest.model_validate(payload)
    except PayloadError as e:
        raise ValidationError(
            "Invalid request body", details={"errors": e.errors(include_url=False)}
        ) from e

    if not body.content or body.metadata is None:
        raise ValidationError("Content and metadata are required")
    if len(body.content) > max_content_length:
        raise ValidationError(
            "Content too large",
            details={"length": len(body.content), "max_content_length": max_content_length},
        )
    return body


def cache_entry_key(body: AnalyzeRequest) -> Tuple[str, str]:
    """Cache key pairing the caller's ``cacheKey`` with a digest of the inputs.

    An edited draft posted again under the same ``cacheKey`` gets a fresh
    analysis instead of the stored one.
    """
    inputs = json.dumps(
        {"content": body.content, "metadata": body.metadata, "corpus": body.corpus},
        sort_keys=True,
        default=str,
    )
    return body.cache_key, hashlib.sha256(inputs.encode()).hexdigest()


def create_app(config: Optional[ServiceConfig] = None) -> Flask:
    """Create the Flask application.

    Args:
        config: Service configuration, defaults to ``ServiceConfig()``

    Returns:
        Flask app exposing ``POST /seo/analyze`` and ``GET /health``
    """
    config = config or ServiceConfig()
    app = Flask(__name__)
    engine = SEOScoringEngine()
    cache: TTLCache = TTLCache(maxsize=config.cache_size, ttl=config.cache_ttl)
    cache_lock = threading.Lock()

    app.extensions["content_scoring"] = {"config": config, "cache": cache, "engine": engine}

    @app.errorhandler(BaseError)
    def handle_error(error: BaseError):
        record_error(error.category.value)
        logger.warning("request_rejected", error=error.message, category=error.category.value)
        return jsonify(camelize(error.to_dict())), 400

    @app.route("/seo/analyze", methods=["POST"])
    def analyze():
        """Score one article."""
        body = parse_analyze_request(request.get_json(silent=True), config.max_content_length)

        key = cache_entry_key(body) if body.cache_key else None
        if key:
            with cache_lock:
                cached = cache.get(key)
            if cached is not None:
                logger.debug("cache_hit", cache_key=body.cache_key)
                return jsonify({**cached, "fromCache": True})

        start = time.perf_counter()
        result = engine.analyze(body.content, body.metadata, body.corpus)
        duration = time.perf_counter() - start
        record_analysis(result, duration, operation="api")

        payload = {**camelize(result.to_dict()), "processingTime": round(duration * 1000, 3)}
        if key:
            with cache_lock:
                cache[key] = payload

        logger.info(
            "analysis_served",
            overall=result.scores.overall,
            duration_ms=payload["processingTime"],
            cache_key=body.cache_key,
        )
        return jsonify({**payload, "fromCache": False})

    @app.route("/health", methods=["GET"])
    def health():
        with cache_lock:
            cached = len(cache)
        return jsonify({"status": "ok", "version": __version__, "cachedResults": cached})

    return app


class ServerThread(threading.Thread):
    def __init__(self, app, host, port):
        threading.Thread.__init__(self)
        self.server = make_server(host, port, app)
        self.ctx = app.app_context()
        self.ctx.push()

    def run(self):
        self.server.serve_forever()

    def shutdown(self):
        self.server.shutdown()


def start_api_server(host="localhost", port=8000, config: Optional[ServiceConfig] = None):
    """Start the API server in a background thread."""
    global server
    if server:
        raise RuntimeError("API server already running")

    server = ServerThread(create_app(config), host, port)
    server.daemon = True
    server.start()
    logger.info("api_server_started", host=host, port=port)
    return server


def stop_api_server():
    """Stop the API server."""
    global server
    if server:
        server.shutdown()
        server = None
        logger.info("api_server_stopped")
