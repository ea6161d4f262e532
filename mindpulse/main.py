"""
MindPulse FastAPI Application
=============================
Entry point for running the assessment API with uvicorn.
"""

from mindpulse.app_factory import create_application
from mindpulse.core.config.settings import get_settings
from mindpulse.core.logging_config import build_logging_config, setup_logging

settings = get_settings()
setup_logging(build_logging_config(level=settings.LOG_LEVEL))

app = create_application(settings)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
