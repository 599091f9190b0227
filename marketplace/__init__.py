"""
Marketplace catalog service.

Product listings with S3-hosted images behind a FastAPI HTTP surface.
"""

__version__ = "1.0.0"
