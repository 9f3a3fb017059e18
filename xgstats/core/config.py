"""
Zentrale Konfiguration für die xG Stats Pipeline
Basiert auf Pydantic Settings mit Environment Variable Support
"""

from typing import Optional

from pydantic_settings import BaseSettings

from xgstats.common.playwright_utils import DEFAULT_USER_AGENT, RenderOptions


class Settings(BaseSettings):
    """Application Settings mit Environment Variable Support"""

    # Application
    app_name: str = "xgstats"
    app_version: str = "0.1.0"
    environment: str = "development"  # development, staging, production

    # Scraping (SCRAPER_HEADLESS=false opens a visible browser window)
    scraper_headless: bool = True
    scraper_debug: bool = False
    chrome_path: Optional[str] = None
    scraper_timeout_seconds: float = 60.0
    scraper_settle_seconds: float = 5.0
    scraper_user_agent: str = DEFAULT_USER_AGENT

    # Database
    database_url: str = "sqlite:///./xgstats.db"
    database_echo: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # console | json

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def render_options(self) -> RenderOptions:
        """Build the explicit renderer configuration from these settings."""
        return RenderOptions(
            headless=self.scraper_headless,
            executable_path=self.chrome_path or None,
            debug=self.scraper_debug,
            timeout_s=self.scraper_timeout_seconds,
            settle_s=self.scraper_settle_seconds,
            user_agent=self.scraper_user_agent,
        )


# Global Settings Instance
settings = Settings()
