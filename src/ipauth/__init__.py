
from .errors import IPAuthError, ConfigurationError, InvalidAddress, InternalEvaluationError
from .data import Address, parse_address, is_valid_address, Outcome, Denied, PassThrough, Accepted, DenyReason
from .rules import Rule, SubnetCheck, AllowListCheck, create_rule
from .evaluator import Evaluator, PolicyEvaluator, FunctionEvaluator
from .policy import Policy, Mode
from .decision import decide
from .chain import AuthChain
from .policy_factory import get_policy, policy_from_env, clear_policy_cache
