"""
HTTP layer for the Image Gateway
"""
