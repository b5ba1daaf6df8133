import uvicorn

from teamdesk.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "teamdesk.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# For local development: python -m teamdesk
if __name__ == "__main__":
    main()
