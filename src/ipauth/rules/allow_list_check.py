from ..data.address import Address, parse_address
from ..errors import ConfigurationError, InvalidAddress
from .rule import Rule

class AllowListCheck(Rule):
    """
    Check if the client address is exactly one of the allowed addresses.
    No ranges or wildcards, use a SubnetCheck for that.
    """
    addresses: frozenset[Address]

    def __init__(self, addresses: list[str]):
        if not isinstance(addresses, (list, tuple, set, frozenset)):
            raise ConfigurationError(f"Allow list must be a list of addresses, got {type(addresses).__name__}", field="allow_list")

        parsed = []
        for address in addresses:
            try:
                parsed.append(parse_address(address))
            except InvalidAddress:
                raise ConfigurationError(f"Allow list contains an invalid address: {address!r}", field="allow_list")
        if not parsed:
            raise ConfigurationError("Allow list is empty", field="allow_list")

        self.addresses = frozenset(parsed)
        super().__init__("AllowListCheck")

    def matches(self, address: Address) -> bool:
        return address in self.addresses

    def __repr__(self):
        return f"AllowListCheck({sorted(str(a) for a in self.addresses)})"
