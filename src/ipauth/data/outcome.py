from dataclasses import dataclass
from enum import Enum


class DenyReason(Enum):
    INVALID_ADDRESS = "invalid-address"
    FORBIDDEN = "forbidden"
    INTERNAL_ERROR = "internal-error"


class Outcome:
    """
    The result of one authorization attempt.
    Exactly one of Denied, PassThrough or Accepted.
    """
    denied:bool = False
    authenticated:bool = False


@dataclass(frozen=True)
class Denied(Outcome):
    """
    Reject the request. Mapping to a transport response is up to the caller.
    """
    reason:DenyReason
    message:str = "Forbidden access"
    status_hint:int = 401
    denied = True


@dataclass(frozen=True)
class PassThrough(Outcome):
    """
    Not rejected, and no identity asserted: continue with the next check.
    """


@dataclass(frozen=True)
class Accepted(Outcome):
    """
    Authenticated, with the client address as the identity, exactly as the client sent it.
    """
    identity:str
    authenticated = True
