"""Run the API with uvicorn: ``python -m quizhub``."""
import uvicorn

from quizhub.core.config import settings


def main():
    uvicorn.run(
        "quizhub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
