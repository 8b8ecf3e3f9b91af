"""Run the API server: ``python -m template_config``."""

import uvicorn

from template_config.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "template_config.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development and settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
