"""
Configuration Management
Environment-based settings common to every microshop process
"""

import logging
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ServiceSettings(BaseSettings):
    """Base settings for a microshop HTTP process"""

    # Service info
    service_name: str = "microshop"
    service_version: str = "1.0.0"

    # Server binding
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_config: Optional[str] = None

    # CORS
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Port must be between 1 and 65535')
        return v

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        v = v.lower()
        if v not in ('json', 'console'):
            raise ValueError("Log format must be 'json' or 'console'")
        return v

    def log_config_summary(self):
        """Log configuration"""
        logger.info(f"Service: {self.service_name} {self.service_version}")
        logger.info(f"Listening on {self.host}:{self.port}")
        logger.info(f"Log level: {self.log_level}, format: {self.log_format}")
