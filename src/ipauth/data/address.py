from dataclasses import dataclass
from re import compile

from ..errors import InvalidAddress

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IP_REGEX = compile(r"\.".join([_OCTET] * 4))


@dataclass(frozen=True)
class Address:
    """
    An IPv4 address as four octets.
    Only ever built from validated text, see parse_address.
    """
    octets:tuple[int, int, int, int]

    def __str__(self):
        return ".".join(str(octet) for octet in self.octets)


def parse_address(text:str) -> Address:
    """
    Parse a dotted-quad IPv4 address, eg. 172.24.4.4
    Raises InvalidAddress for anything else (including None and the empty string).
    """
    if not isinstance(text, str) or not text:
        raise InvalidAddress(text)

    match = IP_REGEX.fullmatch(text)
    if match is None:
        raise InvalidAddress(text)

    return Address(tuple(int(group) for group in match.groups()))


def is_valid_address(text:str) -> bool:
    try:
        parse_address(text)
    except InvalidAddress:
        return False
    return True
