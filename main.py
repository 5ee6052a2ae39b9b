"""Process entry point: ``python main.py`` or ``crud-api``."""

import uvicorn

from app.config import load_settings
from app.main import configure_logging, create_app


def run() -> None:
    settings = load_settings()
    configure_logging(settings.server.log_level)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.server.log_level.lower(),
    )


if __name__ == "__main__":
    run()
