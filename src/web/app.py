# src/web/app.py
# HTTP entry point for the player lookup proxy.

import logging
from typing import Optional

from flask import Flask, jsonify, request

from src.api.coc_client import CocClient
from src.api.config import load_settings
from src.api.outcomes import Failure
from src.api.players import lookup_player

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("src").setLevel(level)


def create_app(client: Optional[CocClient] = None) -> Flask:
    if client is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        client = CocClient(settings)

    app = Flask(__name__)
    # Hand the upstream document back in the order it arrived
    app.json.sort_keys = False

    @app.route("/api/player", methods=["GET"])
    def get_player():
        tag = request.args.get("tag")
        result = lookup_player(tag, client)

        if isinstance(result, Failure):
            logger.warning(
                "Lookup failed for %r: %s (%s)", tag, result.kind.value, result.message
            )
            return jsonify(result.to_body()), result.http_status

        return jsonify(result.payload)

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
