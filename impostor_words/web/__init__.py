"""
Web interface module for admin and player endpoints.
"""

from .round_server import RoundServer

__all__ = ['RoundServer']
