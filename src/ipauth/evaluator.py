"""
Evaluators turn a (policy, address) pair into a verdict.

PolicyEvaluator is the built-in one: the policy's subnet rule OR its allow list.
A policy may carry any other Evaluator, or a plain callable wrapped in a FunctionEvaluator.
"""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Union, TYPE_CHECKING

from .data.address import Address

if TYPE_CHECKING:
    from .policy import Policy

Verdict = Union[bool, Awaitable[bool]]


class Evaluator(ABC):

    @abstractmethod
    def evaluate(self, policy:"Policy", address:Address) -> Verdict:
        """
        Return True if the address is allowed by the policy.
        May return an awaitable, which is awaited before deciding.
        """
        pass


class PolicyEvaluator(Evaluator):
    """
    Match if either configured arm of the policy matches.
    """

    def evaluate(self, policy:"Policy", address:Address) -> bool:
        if policy.subnet is not None and policy.subnet.matches(address):
            return True
        if policy.allow_list is not None and policy.allow_list.matches(address):
            return True
        return False


class FunctionEvaluator(Evaluator):
    """
    Adapt a plain (sync or async) function fn(policy, address) -> bool
    """
    fn:Callable[["Policy", Address], Verdict]

    def __init__(self, fn:Callable[["Policy", Address], Verdict]):
        if not callable(fn):
            raise TypeError("Evaluator function must be callable")
        self.fn = fn

    def evaluate(self, policy:"Policy", address:Address) -> Verdict:
        return self.fn(policy, address)

    def __repr__(self):
        return f"FunctionEvaluator({getattr(self.fn, '__name__', self.fn)!r})"


DEFAULT_EVALUATOR = PolicyEvaluator()
