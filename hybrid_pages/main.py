"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from hybrid_pages.config import get_settings
from hybrid_pages.core.app_factory import create_app
from hybrid_pages.logging_config import setup_logging

# Load environment variables from .env file in the working directory
load_dotenv(Path.cwd() / ".env")

settings = get_settings()

# Configure structured logging (JSON to file + console)
setup_logging(settings.log_level, settings.log_dir)

# Create application
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hybrid_pages.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
