from ..data.address import Address, parse_address
from ..errors import ConfigurationError, InvalidAddress
from .rule import Rule

MIN_MASK_BITS = 8
MAX_MASK_BITS = 30

class SubnetCheck(Rule):
    """
    Check if the client address belongs to a network, given as a network address and a mask length (8-30).

    Octets fully inside the mask must equal the network octets.
    The octet the mask boundary falls in (the border octet) is checked against an inclusive range:
        network_octet <= client_octet <= network_octet + 2 ** (8 - remaining_bits)
    Octets after the border octet always match.

    The border bound is additive, not a bitmask compare, so it is only exact for network addresses
    whose host bits are zero, and the upper end reaches one past the last host of the block.
    """
    network:Address
    mask_bits:int
    border_index:int
    border_max_client_value:int

    def __init__(self, network_address: str, mask_bits: int):
        try:
            self.network = parse_address(network_address)
        except InvalidAddress:
            raise ConfigurationError(f"Invalid network address: {network_address!r}", field="network_address")

        if isinstance(mask_bits, bool) or not isinstance(mask_bits, int):
            raise ConfigurationError(f"Invalid subnet mask: {mask_bits!r}", field="mask_bits")
        if mask_bits < MIN_MASK_BITS or mask_bits > MAX_MASK_BITS:
            raise ConfigurationError(f"Subnet mask must be between {MIN_MASK_BITS} and {MAX_MASK_BITS}, got {mask_bits}", field="mask_bits")

        self.mask_bits = mask_bits
        self.border_index = mask_bits // 8
        remaining_bits = mask_bits - self.border_index * 8
        self.border_max_client_value = 2 ** (8 - remaining_bits)
        super().__init__("SubnetCheck")

    def matches(self, address: Address) -> bool:
        """
        Check if the client address is in the configured network.
        """
        for index, octet in enumerate(address.octets):
            network_octet = self.network.octets[index]
            if index < self.border_index:
                if octet != network_octet:
                    return False
            elif index == self.border_index:
                if octet < network_octet or octet > network_octet + self.border_max_client_value:
                    return False
            else:
                break   ## Host part, anything goes

        return True

    def __repr__(self):
        return f"SubnetCheck({self.network}/{self.mask_bits})"
