"""Process entry point running the HTTP server."""

from __future__ import annotations

import uvicorn

from nbc_rates.api import create_app
from nbc_rates.config import load_settings


def main() -> None:
    """Serve the exchange rate endpoint until interrupted."""

    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
