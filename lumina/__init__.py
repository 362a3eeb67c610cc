"""
Lumina PDF Reader.
"""

__version__ = "0.3.0"
