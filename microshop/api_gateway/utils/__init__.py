"""
Utility modules for the API gateway
"""

from .service_client import ServiceClient, service_clients

__all__ = ["ServiceClient", "service_clients"]
