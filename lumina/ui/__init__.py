"""
User interface for Lumina PDF Reader.
"""
