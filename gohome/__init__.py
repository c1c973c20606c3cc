"""
go-home API: rental listing and booking backend.
"""

__version__ = "1.0.0"
