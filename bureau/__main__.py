"""Run the API with uvicorn: ``python -m bureau``."""

import uvicorn

from bureau.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bureau.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
