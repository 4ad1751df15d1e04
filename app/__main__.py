import uvicorn

from app.core.config import settings
from app.core.logging import setup_logging


def main() -> None:
    setup_logging(settings.log_level)
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
