"""Run the Roadmap API with uvicorn: ``python -m roadmap_api``."""

import uvicorn

from roadmap_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "roadmap_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
