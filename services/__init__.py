"""
Service layer for the Image Gateway
"""

from .metadata_service import MetadataService

__all__ = ["MetadataService"]
