"""
Standalone diagnostic commands.

- db_check: verify database connectivity (``whatsms-check-db``)
- whatsapp_check: verify WhatsApp Business API credentials (``whatsms-check-whatsapp``)
"""
