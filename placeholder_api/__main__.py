"""
Run the Placeholder API server.

    python -m placeholder_api

Host, port, store file and log level come from the environment (see
core/config.py). Ctrl+C stops the server; the store is closed on the way out.
"""
# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings
from .core.logging_config import configure_logging
from .main import create_application


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    
    application = create_application(settings)
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
