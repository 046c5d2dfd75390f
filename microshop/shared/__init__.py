"""
Shared utilities for microshop services
"""
