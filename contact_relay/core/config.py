from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Any, List, Optional

TURNSTILE_VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"
RESEND_API_URL = "https://api.resend.com/emails"


class Settings(BaseSettings):
    # Resend delivery
    resend_api_key: str = ""
    from_email: str = ""
    to_email: str = ""  # comma separated
    resend_disabled: bool = False  # skip delivery for local/test runs
    resend_api_url: str = RESEND_API_URL

    # Cloudflare Turnstile
    turnstile_secret: str = ""
    turnstile_verify_url: str = TURNSTILE_VERIFY_URL

    # CORS settings, comma separated ("*" echoes any origin)
    allowed_origins: str = ""

    site_name: Optional[str] = None
    locale: str = "ja"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("resend_disabled", mode="before")
    @classmethod
    def parse_disabled_flag(cls, value: Any) -> bool:
        # only the literal "true" disables delivery; blank or any other text keeps it on
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() == "true"

    @property
    def allowed_origin_list(self) -> List[str]:
        return [entry.strip() for entry in self.allowed_origins.split(",") if entry.strip()]


@lru_cache
def get_settings():
    return Settings()
