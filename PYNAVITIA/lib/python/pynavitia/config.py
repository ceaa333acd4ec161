from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NavitiaSettings(BaseSettings):
    """
    Settings of the Navitia client.
    Read, in this order, from init arguments, environment variables and a .env file.
    """
    # From secrets
    NAVITIA_API_KEY: Optional[str] = Field(default=None)

    navitia_api_url: str = "https://api.navitia.io/v1"
    navitia_coverage: str = "sncf"
    # Seconds
    navitia_timeout: float = 10.0

    model_config = SettingsConfigDict(case_sensitive=False, env_file=".env", extra="ignore")

    @property
    def coverage_url(self) -> str:
        return f"{self.navitia_api_url.rstrip('/')}/coverage/{self.navitia_coverage}"

    def require_api_key(self) -> str:
        if not self.NAVITIA_API_KEY:
            raise ValueError("NAVITIA_API_KEY not found in settings.")
        return self.NAVITIA_API_KEY
