"""
Serverless impostor word game: deterministic roles and words shared by link.
"""

__version__ = "0.1.0"
