"""
Coldcall Configuration
Manages environment variables and application settings
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    app_name: str = Field(default="Coldcall", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # Caller identity used in scripts
    agent_name: str = Field(default="Alex", alias="AGENT_NAME")
    company_name: str = Field(default="RenderWiseAI", alias="COMPANY_NAME")
    callback_number: str = Field(default="", alias="CALLBACK_NUMBER")

    # Scripts
    default_template_id: str = Field(default="web-design", alias="DEFAULT_TEMPLATE_ID")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()
