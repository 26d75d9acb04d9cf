
from .rule import Rule
from .subnet_check import SubnetCheck, MIN_MASK_BITS, MAX_MASK_BITS
from .allow_list_check import AllowListCheck

from .rule_factory import create_rule
