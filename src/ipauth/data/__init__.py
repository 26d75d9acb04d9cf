
from .address import Address, parse_address, is_valid_address
from .outcome import Outcome, Denied, PassThrough, Accepted, DenyReason
