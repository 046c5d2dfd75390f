from microshop.shared.utils.config import ServiceSettings


class Settings(ServiceSettings):
    """Users service settings"""

    service_name: str = "users-service"
    port: int = 3001


settings = Settings()
