"""
Application configuration settings
"""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    PROJECT_NAME: str = "Document Request Kiosk API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Identity verification
    CODE_LENGTH: int = 6
    CODE_VALIDITY_SECONDS: int = 300
    COUNTDOWN_INTERVAL_SECONDS: float = 1.0
    VERIFICATION_CHANNEL: str = "console"  # console | fixed
    FIXED_VERIFICATION_CODE: Optional[str] = None
    CODE_DELIVERY_DELAY_SECONDS: float = 0.0

    # Submission
    SUBMISSION_DELAY_SECONDS: float = 0.0
    SUBMISSION_TIMEOUT_SECONDS: float = 30.0

    # Kiosk returns to idle this long after a completed request
    RESET_DELAY_SECONDS: float = 3.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
