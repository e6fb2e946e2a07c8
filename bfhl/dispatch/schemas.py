"""Request variants decoded from a single-key /bfhl body."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class FibonacciRequest:
    """{"fibonacci": n}"""

    value: Any


@dataclass(frozen=True)
class PrimeRequest:
    """{"prime": [...]}"""

    value: Any


@dataclass(frozen=True)
class LcmRequest:
    """{"lcm": [...]}"""

    value: Any


@dataclass(frozen=True)
class HcfRequest:
    """{"hcf": [...]}"""

    value: Any


@dataclass(frozen=True)
class AIRequest:
    """{"AI": "question"}"""

    value: Any


BFHLRequest = Union[FibonacciRequest, PrimeRequest, LcmRequest, HcfRequest, AIRequest]

REQUEST_TYPES: dict[str, type] = {
    "fibonacci": FibonacciRequest,
    "prime": PrimeRequest,
    "lcm": LcmRequest,
    "hcf": HcfRequest,
    "AI": AIRequest,
}
