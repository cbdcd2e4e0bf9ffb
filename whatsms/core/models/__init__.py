"""API-facing models shared across WhatsMS."""
