"""
==============================================================================
API Package
==============================================================================

Routers:
--------
- health: Health check endpoints
- products: Product catalog endpoints

==============================================================================
"""
