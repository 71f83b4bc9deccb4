"""Authentication strategies for GetResponse."""
from .api_key import ApiKeyAuth
from .base import AuthStrategy

__all__ = ["AuthStrategy", "ApiKeyAuth"]
