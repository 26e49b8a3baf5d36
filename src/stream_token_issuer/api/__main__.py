"""
stream_token_issuer.api.__main__

Entrypoint for running the FastAPI application via `python -m stream_token_issuer.api`.

Responsibilities:
- Load settings (fails fast on a prod deployment carrying dev secrets).
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from stream_token_issuer.api.app import create_app
from stream_token_issuer.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
