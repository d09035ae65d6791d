"""WSGI entrypoint for Kampusku."""

from __future__ import annotations

import logging
import os

from kampusku import create_app

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = create_app()

if __name__ == "__main__":
    host = os.environ.get("FLASK_RUN_HOST", "127.0.0.1")
    port = int(os.environ.get("FLASK_RUN_PORT", "8082"))
    app.run(host=host, port=port)  # nosec B104
