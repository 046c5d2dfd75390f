"""
Microshop
API gateway with users and products services over in-memory stores
"""

__version__ = "1.0.0"
