"""
Exception hierarchy for ipauth.

Only ConfigurationError is meant to escape to the caller, and only at setup time.
InvalidAddress and InternalEvaluationError are turned into a Denied outcome on the request path.
"""
from typing import Any


class IPAuthError(Exception):
    """
    Base class for all ipauth errors.
    """
    message:str
    details:dict[str, Any]

    def __init__(self, message:str, details:dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(IPAuthError, ValueError):
    """
    A policy option is missing or malformed.
    """
    field:str

    def __init__(self, message:str, field:str = None, details:dict[str, Any] = None):
        super().__init__(message, details)
        self.field = field


class InvalidAddress(IPAuthError, ValueError):
    """
    The client address is absent or is not a dotted-quad IPv4 address.
    """
    address:Any

    def __init__(self, address:Any):
        super().__init__(f"Invalid IPv4 address: {address!r}", {"address": address})
        self.address = address


class InternalEvaluationError(IPAuthError):
    """
    An evaluator failed while deciding on a request.
    """
    original_error:Exception

    def __init__(self, original_error:Exception, address:str = None):
        message = f"Policy evaluation failed: {original_error}"
        details = {"address": address} if address is not None else None
        super().__init__(message, details)
        self.original_error = original_error
