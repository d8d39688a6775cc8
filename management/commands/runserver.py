import uvicorn

from app.core.config import settings


def run():
    """Start the API server on HOST:PORT"""
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    run()
