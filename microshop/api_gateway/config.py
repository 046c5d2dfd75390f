"""
Gateway configuration
Backend base URLs and proxy limits come from the environment
"""

from pydantic import field_validator

from microshop.shared.utils.config import ServiceSettings


class Settings(ServiceSettings):
    """API gateway settings"""

    service_name: str = "api-gateway"
    port: int = 3000

    # Backend services
    users_service_url: str = "http://localhost:3001"
    products_service_url: str = "http://localhost:3002"

    # Outbound request limits
    proxy_timeout: float = 10.0
    connect_timeout: float = 5.0
    max_connections: int = 100
    max_keepalive_connections: int = 20

    @field_validator('users_service_url', 'products_service_url')
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip('/')

    @field_validator('proxy_timeout', 'connect_timeout')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError('Timeouts must be greater than 0 seconds')
        return v


settings = Settings()
