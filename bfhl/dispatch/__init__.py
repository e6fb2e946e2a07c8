"""Dispatch module - /bfhl request decoding and routing."""

from .schemas import (
    AIRequest,
    BFHLRequest,
    FibonacciRequest,
    HcfRequest,
    LcmRequest,
    PrimeRequest,
)
from .service import decode_request, dispatch
from .router import router


__all__ = [
    # Schemas
    "AIRequest",
    "BFHLRequest",
    "FibonacciRequest",
    "HcfRequest",
    "LcmRequest",
    "PrimeRequest",
    # Service
    "decode_request",
    "dispatch",
    # Router
    "router",
]
