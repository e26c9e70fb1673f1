"""
Script to run the custom_fetch mock server.
"""

from pathlib import Path

import uvicorn


def main():
    """Run the mock server; reload is controlled by MOCK_SERVER_RELOAD."""
    # Load environment variables from .env file
    env_path = Path(__file__).parent / ".env"
    if env_path.exists():
        from dotenv import load_dotenv

        load_dotenv(env_path)

    from custom_fetch.settings import Settings

    settings = Settings()

    uvicorn.run(
        "custom_fetch.mock_server.main:app",
        host=settings.get_mock_server_host(),
        port=settings.get_mock_server_port(),
        reload=settings.get_mock_server_reload(),
        reload_dirs=["custom_fetch"],  # Only watch our package directory
        log_level=settings.get_log_level().lower(),
    )


if __name__ == "__main__":
    main()
