"""
Products Service
Product catalog backed by an in-memory store
"""
