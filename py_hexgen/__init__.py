"""
Procedural hex campaign map generation.
"""

__version__ = "0.1.0"
