import os
from cachetools import TTLCache

from .errors import ConfigurationError
from .policy import Policy

ENV_PREFIX = "IPAUTH_"
_POLICY_CACHE = TTLCache(maxsize=100, ttl=3600)  # 1 hour TTL

def get_policy(name:str) -> Policy:
    """
    Get a named policy from the cache, or build it from the environment if it isn't cached yet.

    For a policy named "office" the following variables are read:
        IPAUTH_OFFICE_NETWORK_ADDRESS   eg. 172.24.0.0
        IPAUTH_OFFICE_SUBNET_MASK       eg. 16
        IPAUTH_OFFICE_ALLOW_LIST        comma separated, eg. 192.143.0.1,192.143.10.10
        IPAUTH_OFFICE_MODE              forward (default) or terminate
    """
    global _POLICY_CACHE
    lower_name = name.lower()
    if lower_name in _POLICY_CACHE:
        return _POLICY_CACHE[lower_name]

    policy = policy_from_env(name)
    _POLICY_CACHE[lower_name] = policy
    return policy


def policy_from_env(name:str, environ:dict[str, str] = None) -> Policy:
    if environ is None:
        environ = os.environ

    prefix = ENV_PREFIX + name.upper().replace("-", "_") + "_"
    options = {"name": name}

    network_address = environ.get(prefix + "NETWORK_ADDRESS", "").strip()
    if network_address:
        options["network_address"] = network_address

    subnet_mask = environ.get(prefix + "SUBNET_MASK", "").strip()
    if subnet_mask:
        try:
            options["mask_bits"] = int(subnet_mask)
        except ValueError:
            raise ConfigurationError(f"Invalid subnet mask in {prefix}SUBNET_MASK: {subnet_mask!r}", field="mask_bits")

    allow_list = environ.get(prefix + "ALLOW_LIST", "")
    addresses = [address.strip() for address in allow_list.split(",") if address.strip()]
    if addresses:
        options["allow_list"] = addresses

    mode = environ.get(prefix + "MODE", "").strip()
    if mode:
        options["mode"] = mode

    if len(options) == 1:
        raise ConfigurationError(f"No policy configured in the environment for {name} [{prefix}*]")

    return Policy.from_dict(options)


def clear_policy_cache():
    _POLICY_CACHE.clear()
