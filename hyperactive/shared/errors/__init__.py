"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every helper failure
is consistently translated into an API response.
"""

from hyperactive.shared.errors.handlers import into_response, register_error_handlers

__all__ = ["into_response", "register_error_handlers"]
