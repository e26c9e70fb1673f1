import os
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load .env file variables into environment
load_dotenv()


class Settings:
    """Client and mock server configuration loaded from environment variables."""

    # --- Client Settings ---
    API_BASE_URL: Optional[str] = None

    # --- Mock Server Settings ---
    MOCK_SERVER_HOST: str = "127.0.0.1"
    MOCK_SERVER_PORT: int = 8787

    # --- Helper Methods using os.getenv ---
    def get_api_base_url(self) -> Optional[str]:
        """Returns the API base URL as a string, if set."""
        url = os.getenv("API_BASE_URL")
        if url:
            parsed = urlparse(url)
            if not all([parsed.scheme, parsed.netloc]):
                raise ValueError(f"Invalid API_BASE_URL format: {url}")
        return url

    # --- Logging Settings ---
    def get_log_level(self, default: str = "INFO") -> str:
        """Gets the configured log level, defaulting if not set."""
        return os.getenv("LOG_LEVEL", default).upper()

    def get_run_mode(self) -> str:
        """Returns the run mode, defaulting to 'prod' if not set."""
        return os.getenv("RUN_MODE", "prod")

    def dev_mode(self) -> bool:
        """Returns True if the run mode is 'dev', False otherwise."""
        return self.get_run_mode() == "dev"

    # --- Mock Server Getters ---
    def get_mock_server_host(self) -> str:
        return os.getenv("MOCK_SERVER_HOST", self.MOCK_SERVER_HOST)

    def get_mock_server_port(self) -> int:
        """Returns the mock server port as an integer."""
        port_str = os.getenv("MOCK_SERVER_PORT")
        if port_str is None:
            return self.MOCK_SERVER_PORT
        try:
            return int(port_str)
        except ValueError:
            raise ValueError("MOCK_SERVER_PORT environment variable must be an integer.")

    def get_mock_server_reload(self) -> bool:
        return os.getenv("MOCK_SERVER_RELOAD", "false").lower() == "true"
