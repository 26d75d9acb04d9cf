from enum import Enum
from typing import Any, Callable, Union

from .errors import ConfigurationError
from .evaluator import Evaluator, FunctionEvaluator, DEFAULT_EVALUATOR
from .rules import SubnetCheck, AllowListCheck, create_rule

Reporter = Callable[[Exception], Any]


class Mode(Enum):
    """
    What a matching address produces.
    FORWARD_TO_NEXT only clears the request for the next check, TERMINATE_CHAIN authenticates it.
    """
    FORWARD_TO_NEXT = "forward"
    TERMINATE_CHAIN = "terminate"

    @classmethod
    def parse(cls, value:Union["Mode", str]) -> "Mode":
        if isinstance(value, Mode):
            return value
        if isinstance(value, str):
            lower_value = value.strip().lower()
            for mode in cls:
                if lower_value in (mode.value, mode.name.lower()):
                    return mode
            if lower_value in ("forward-to-next", "forward_to_next", "next"):
                return cls.FORWARD_TO_NEXT
            if lower_value in ("terminate-chain", "terminate_chain", "authenticate"):
                return cls.TERMINATE_CHAIN
        raise ConfigurationError(f"Invalid mode: {value!r}", field="mode")


class Policy:
    """
    The network policy of one IP check: a subnet rule, an allow list, or both.

    Validated once when constructed and read-only afterwards, so a single
    instance can serve any number of concurrent requests.

    Options are checked in this order, the first failure raises a ConfigurationError:
    - at least one of (network_address + mask_bits) or a non-empty allow_list
    - network_address and mask_bits (8-30)
    - every allow_list entry
    - mode
    - evaluator (an Evaluator or a callable)
    - reporter (a callable)
    """
    name:str
    subnet:SubnetCheck = None
    allow_list:AllowListCheck = None
    mode:Mode
    evaluator:Evaluator
    reporter:Reporter = None

    def __init__(self,
                 network_address:str = None,
                 mask_bits:int = None,
                 allow_list:list[str] = None,
                 mode:Union[Mode, str] = Mode.FORWARD_TO_NEXT,
                 evaluator:Union[Evaluator, Callable] = None,
                 reporter:Reporter = None,
                 name:str = "ip-whitelist"):
        has_subnet = network_address is not None or mask_bits is not None
        if not has_subnet and not allow_list:
            raise ConfigurationError("Policy has neither a subnet nor an allow list configured")

        subnet = None
        if has_subnet:
            if network_address is None:
                raise ConfigurationError("Subnet mask given without a network address", field="network_address")
            if mask_bits is None:
                raise ConfigurationError("Network address given without a subnet mask", field="mask_bits")
            subnet = SubnetCheck(network_address, mask_bits)

        addresses = AllowListCheck(allow_list) if allow_list else None

        mode = Mode.parse(mode)

        if evaluator is None:
            evaluator = DEFAULT_EVALUATOR
        elif not isinstance(evaluator, Evaluator):
            if not callable(evaluator):
                raise ConfigurationError("Evaluator must be callable", field="evaluator")
            evaluator = FunctionEvaluator(evaluator)

        if reporter is not None and not callable(reporter):
            raise ConfigurationError("Reporter must be callable", field="reporter")

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "subnet", subnet)
        object.__setattr__(self, "allow_list", addresses)
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "evaluator", evaluator)
        object.__setattr__(self, "reporter", reporter)

    def __setattr__(self, key, value):
        raise AttributeError(f"Policy is read-only, cannot set {key}")

    @classmethod
    def from_dict(cls, options:dict[str, Any]) -> "Policy":
        """
        Build a policy from an options dictionary.
        Accepts snake_case names as well as the camelCase ones (networkAddress, subnetMask,
        addressWhitelist, forwardToNextStrategy, validationFunction, logger).
        """
        if not options:
            raise ConfigurationError("Missing ip-whitelist policy options")

        subnet = None
        if any(key in options for key in ("network_address", "networkAddress", "mask_bits", "subnet_mask", "subnetMask")):
            subnet = create_rule("subnet", options)

        allow_list = None
        vals = options.get("allow_list", options.get("address_whitelist", options.get("addressWhitelist", None)))
        if vals:
            allow_list = create_rule("allow-list", options)

        if subnet is None and allow_list is None:
            raise ConfigurationError("Policy has neither a subnet nor an allow list configured")

        mode = options.get("mode", None)
        if mode is None:
            forward = options.get("forward_to_next", options.get("forwardToNextStrategy", True))
            if not isinstance(forward, bool):
                raise ConfigurationError(f"Invalid forward to next strategy flag: {forward!r}", field="mode")
            mode = Mode.FORWARD_TO_NEXT if forward else Mode.TERMINATE_CHAIN

        evaluator = options.get("evaluator", options.get("custom_evaluator", options.get("validation_function", options.get("validationFunction", None))))
        reporter = options.get("reporter", options.get("logger", None))

        return cls(
            network_address=str(subnet.network) if subnet else None,
            mask_bits=subnet.mask_bits if subnet else None,
            allow_list=[str(a) for a in allow_list.addresses] if allow_list else None,
            mode=mode,
            evaluator=evaluator,
            reporter=reporter,
            name=options.get("name", "ip-whitelist"),
        )

    async def authenticate(self, client_address:str):
        """
        Decide on a single request, see decision.decide
        """
        from .decision import decide
        return await decide(self, client_address)

    def __repr__(self):
        return f"Policy(name={self.name}, subnet={self.subnet}, allow_list={self.allow_list}, mode={self.mode.name}, evaluator={self.evaluator})"
