"""Resource-specific convenience wrappers."""
from .contacts import ContactsResource

__all__ = ["ContactsResource"]
