"""
WhatsMS Server Package.

This package contains the web server implementation for WhatsMS.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Global error handling.
    middleware: Request tracing.
"""
