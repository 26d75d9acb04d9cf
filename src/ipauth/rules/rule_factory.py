from typing import Any

from ..errors import ConfigurationError
from .rule import Rule
from .subnet_check import SubnetCheck
from .allow_list_check import AllowListCheck

def create_rule(rule_type:str, claims:dict[str, Any]) -> Rule:
    """
    Build a rule from its option dictionary.
    Both snake_case and the older camelCase option names are accepted.
    """
    if rule_type == "subnet":
        network_address = claims.get("network_address", claims.get("networkAddress", None))
        if not network_address:
            raise ConfigurationError("Network address is required", field="network_address")
        mask_bits = claims.get("mask_bits", claims.get("subnet_mask", claims.get("subnetMask", None)))
        if mask_bits is None:
            raise ConfigurationError("Subnet mask is required", field="mask_bits")
        return SubnetCheck(network_address, mask_bits)
    elif rule_type == "allow-list":
        vals = claims.get("allow_list", claims.get("address_whitelist", claims.get("addressWhitelist", [])))
        return AllowListCheck(vals)
    else:
        raise ConfigurationError(f"Invalid rule type: {rule_type}", field="rule_type")
