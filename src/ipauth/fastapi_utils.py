from azurefunctions.extensions.http.fastapi import Request as FastApiRequest, Response as FastApiResponse

from .data.outcome import Outcome
from .chain import AuthChain
from .policy import Policy

def resolve_client_address(req: FastApiRequest, trust_forwarded_for:bool = True) -> str:
    """
    Work out the address of the client that sent the request.

    The last entry of the X-Forwarded-For header is used when present, otherwise the peer address of the connection.
    Only trust the header when the app sits behind a reverse proxy that sets it, otherwise a client can send
    whatever address it likes.
    """
    headers = req.headers
    if not headers:
        headers = {}

    if trust_forwarded_for:
        forwarded_ips = headers.get('x-forwarded-for', None)
        if forwarded_ips:
            client_ip = forwarded_ips.split(",")[-1].strip()
            if client_ip:
                return client_ip

    return req.client.host if req.client else None


async def validate_request(req: FastApiRequest, policy:Policy | AuthChain, default_fail_status:int = None, include_reason:bool = True, trust_forwarded_for:bool = True) -> tuple[bool, Outcome, FastApiResponse]:
    """
    Run the policy (or chain of checks) for a request.

    Returns (authenticated, outcome, response):
        Accepted    -> (True, outcome, None)
        PassThrough -> (False, outcome, None), the caller should run its next check
        Denied      -> (False, outcome, response to send back)
    """
    client_address = resolve_client_address(req, trust_forwarded_for)
    if isinstance(policy, AuthChain):
        outcome, _ = await policy.authenticate(client_address)
    else:
        outcome = await policy.authenticate(client_address)

    if outcome.authenticated:
        return True, outcome, None
    if not outcome.denied:
        return False, outcome, None

    response = FastApiResponse(outcome.message, status_code=default_fail_status or outcome.status_hint)
    if include_reason:
        response.headers["x-reason"] = outcome.reason.value
    return False, outcome, response
