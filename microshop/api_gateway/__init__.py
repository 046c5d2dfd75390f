"""
API Gateway
Stateless reverse proxy in front of the users and products services
"""
