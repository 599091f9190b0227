"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across API endpoints.

==============================================================================
"""

from typing import Dict
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Simple confirmation message."""
    success: bool = Field(default=True)
    message: str


class HealthResponse(BaseModel):
    """Health check summary."""
    status: str
    components: Dict[str, str]
