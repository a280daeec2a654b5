"""
API Routers for the Image Gateway
"""

from . import image, metadata, system

__all__ = ["image", "metadata", "system"]
