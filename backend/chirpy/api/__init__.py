"""
Chirpy FastAPI REST API.

This package provides the HTTP surface of Chirpy:
- User and chirp endpoints under /api
- Fileserver hit metrics under /admin
- Static file serving under /app

For more information, see the API documentation at /docs
"""

__version__ = "0.1.0"
