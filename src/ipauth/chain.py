from typing import Protocol

from .data.outcome import Outcome, Denied, DenyReason
from .errors import ConfigurationError


class Check(Protocol):
    name:str

    async def authenticate(self, client_address:str) -> Outcome:
        ...


class AuthChain:
    """
    Run a list of checks in order, the way a route with several auth strategies does.

    The first check that accepts or denies decides the request.
    A check that passes through hands the request to the next one.
    If every check passes through, the request is denied.
    """
    checks:list[Check]

    def __init__(self, checks:list[Check]):
        self.checks = list(checks or [])
        if not self.checks:
            raise ConfigurationError("At least one check is required", field="checks")

    async def authenticate(self, client_address:str) -> tuple[Outcome, str]:
        """
        Returns the deciding outcome, and the name of the check that produced it (None if nobody did).
        """
        for check in self.checks:
            outcome = await check.authenticate(client_address)
            if outcome.authenticated or outcome.denied:
                return outcome, check.name

        return Denied(DenyReason.FORBIDDEN, message="Missing authentication"), None

    def __repr__(self):
        return f"AuthChain(checks={[check.name for check in self.checks]})"
