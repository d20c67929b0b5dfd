# File: xmltally/core/config/settings.py

import os


class Settings:
    # --- Package ---
    APP_NAME: str = "xmltally"
    VERSION: str = "1.0.0"

    # --- Report Layout ---
    # Up to FULL_LISTING_LIMIT files are listed in full, beyond that only
    # the first TRUNCATED_LISTING_SIZE are shown.
    FULL_LISTING_LIMIT: int = 20
    TRUNCATED_LISTING_SIZE: int = 10

    # --- Debug Inspection ---
    DEBUG_SAMPLE_SIZE: int = 15

    @property
    def DEFAULT_EXTENSIONS(self) -> str:
        return os.getenv("XMLTALLY_EXTENSIONS", "*.xml,*.out")

    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("XMLTALLY_LOG_LEVEL", "WARNING").upper()

    @property
    def USE_COLOR(self) -> bool:
        # https://no-color.org: any value disables colour
        return os.getenv("NO_COLOR") is None


settings = Settings()
