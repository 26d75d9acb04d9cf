"""
Turn a client address and a policy into an Outcome.

    address text --parse--> Address --evaluate--> verdict --mode--> Denied | PassThrough | Accepted

Nothing raised on this path reaches the caller: an unreadable address is Denied(INVALID_ADDRESS),
a failing evaluator is reported and becomes Denied(INTERNAL_ERROR).
"""
import logging
from inspect import isawaitable

from .data.address import parse_address
from .data.outcome import Outcome, Denied, PassThrough, Accepted, DenyReason
from .errors import InvalidAddress, InternalEvaluationError
from .policy import Policy, Mode

logger = logging.getLogger(__name__)


async def decide(policy:Policy, client_address:str) -> Outcome:
    try:
        address = parse_address(client_address)
    except InvalidAddress:
        logger.debug("%s: could not read client address %r", policy.name, client_address)
        return Denied(DenyReason.INVALID_ADDRESS)

    try:
        verdict = policy.evaluator.evaluate(policy, address)
        if isawaitable(verdict):
            verdict = await verdict
    except Exception as err:
        logger.error("%s: evaluation failed for %s", policy.name, address, exc_info=True)
        _report(policy, InternalEvaluationError(err, str(address)))
        return Denied(DenyReason.INTERNAL_ERROR)

    if not verdict:
        logger.debug("%s: %s is not allowed", policy.name, address)
        return Denied(DenyReason.FORBIDDEN)

    if policy.mode is Mode.TERMINATE_CHAIN:
        return Accepted(client_address)
    return PassThrough()


def _report(policy:Policy, error:InternalEvaluationError):
    if policy.reporter is None:
        return
    try:
        policy.reporter(error)
    except Exception:
        logger.exception("%s: reporter failed", policy.name)
