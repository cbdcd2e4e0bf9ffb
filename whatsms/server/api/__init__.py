"""HTTP API of the WhatsMS server."""
