"""
API HTTP del matching.
"""

from gigmatch.api.handlers import create_app

__all__ = ["create_app"]
