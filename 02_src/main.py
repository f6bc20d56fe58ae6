"""Run the in-memory reference tracer server."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from tracer_client.api import create_fastapi_app
from tracer_client.logging_config import setup_logging


def main():
    """Run the server."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8081"))

    app = create_fastapi_app()

    # Point clients at it with TRACER_SERVER=<host>:<port>
    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
