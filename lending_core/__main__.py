# This project was developed with assistance from AI tools.
"""Serve the API with uvicorn: ``python -m lending_core`` or ``lending-core``."""

import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "lending_core.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
