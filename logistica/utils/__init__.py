"""
Utilidades del servicio
"""
from .responses import error_response, paginated_response, success_response
from .security import hash_password, verify_password
from .validation import error_message, error_messages, validate_payload

__all__ = [
    "error_response",
    "paginated_response",
    "success_response",
    "hash_password",
    "verify_password",
    "error_message",
    "error_messages",
    "validate_payload",
]
