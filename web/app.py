"""
Flask web server for In a Nutshell.

Routes
──────
GET  /               Single-page UI
GET  /api/health     Liveness + whether the completion key is configured (JSON)
POST /api/generate   {"topic": "..."} → {"result": "...", "parsed": {...}} (JSON)
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request

# Allow running as `python web/app.py` from the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

from config.settings import Settings
from nutshell.client import CompletionClient
from nutshell.errors import ConfigurationError, ServiceError, TopicValidationError
from nutshell.gate import validate_topic
from nutshell.pipeline import summarise

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

#: Client-facing messages; internal details are only logged.
NOT_CONFIGURED_MESSAGE = "API key not configured."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


def create_app(
    settings: Settings | None = None,
    client: CompletionClient | None = None,
) -> Flask:
    """Build the Flask app.

    Settings are validated once here; a missing key is logged and every
    generate request then answers with the configuration error.

    Args:
        settings: Configuration; read from the environment when omitted.
        client: Completion client; built from *settings* when omitted.
    """
    settings = settings or Settings()
    try:
        settings.validate()
    except ConfigurationError as exc:
        logger.error("Completion service is not configured: %s", exc)

    client = client or CompletionClient(settings)

    app = Flask(__name__)
    app.config["NUTSHELL_SETTINGS"] = settings

    # ── UI ─────────────────────────────────────────────────────────────────

    @app.route("/")
    def index():
        return render_template(
            "index.html", max_topic_length=settings.max_topic_length
        )

    # ── API ────────────────────────────────────────────────────────────────

    @app.route("/api/health")
    def health():
        return jsonify({"status": "ok", "configured": settings.configured})

    @app.route("/api/generate", methods=["POST"])
    def generate():
        """Summarise the topic in the JSON body.

        Status codes:
          200  {"topic", "result", "parsed"}
          400  {"error": "<validation message>"}
          500  {"error": "API key not configured."} or the generic message
        """
        body = request.get_json(silent=True)
        raw_topic = body.get("topic") if isinstance(body, dict) else None

        try:
            topic = validate_topic(raw_topic, max_length=settings.max_topic_length)
        except TopicValidationError as exc:
            return jsonify({"error": str(exc)}), 400

        if not settings.configured:
            logger.error("Generate request rejected: ANTHROPIC_API_KEY is not set")
            return jsonify({"error": NOT_CONFIGURED_MESSAGE}), 500

        try:
            outcome = summarise(topic, client, settings)
        except ConfigurationError:
            logger.exception("Configuration error for topic=%r", topic)
            return jsonify({"error": NOT_CONFIGURED_MESSAGE}), 500
        except ServiceError:
            logger.exception("Completion service error for topic=%r", topic)
            return jsonify({"error": GENERIC_ERROR_MESSAGE}), 500
        except Exception:
            logger.exception("Unexpected error for topic=%r", topic)
            return jsonify({"error": GENERIC_ERROR_MESSAGE}), 500

        return jsonify(outcome.model_dump())

    return app


app = create_app()


# ── Entry point ────────────────────────────────────────────────────────────

if __name__ == "__main__":
    _settings = app.config["NUTSHELL_SETTINGS"]
    app.run(debug=_settings.debug, host="0.0.0.0", port=_settings.port)
