from microshop.shared.utils.config import ServiceSettings


class Settings(ServiceSettings):
    """Products service settings"""

    service_name: str = "products-service"
    port: int = 3002


settings = Settings()
