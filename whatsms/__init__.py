"""
WhatsMS backend.

Notes REST API for contacts plus diagnostic scripts for the database and the
WhatsApp Business (Graph) API.
"""

__version__ = "1.0.0"
