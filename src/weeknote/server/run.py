"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from ..config import DEFAULT_CONFIG_PATH, Config
from ..logger import setup_logger


def main() -> None:
    """Run the development server."""
    config = Config.from_yaml(DEFAULT_CONFIG_PATH) if DEFAULT_CONFIG_PATH.exists() else Config.from_env()
    setup_logger(config.log_level, config.log_file)

    uvicorn.run(
        "weeknote.server.app:app",
        host=config.server.host,
        port=config.server.port,
        reload=True,
        reload_dirs=["src"],
    )


if __name__ == "__main__":
    main()
