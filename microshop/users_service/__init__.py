"""
Users Service
User directory backed by an in-memory store
"""
