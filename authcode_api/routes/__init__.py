"""Route blueprints package for API endpoints.

Holds the Flask blueprint for the authorization code endpoint and the
development-only docs blueprint. Each module documents its endpoint
responsibilities and JSON contracts.
"""
