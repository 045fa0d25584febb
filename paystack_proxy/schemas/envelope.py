"""Response Envelope — typed success wrapper shared by every route.

Invariants:
    - status is always True here; failures use the ProxyError envelope instead
    - data carries a concrete schema per route (Envelope[RecipientResponse], ...)

Design Decisions:
    - Generic pydantic model over ad-hoc dicts: response shape visible in OpenAPI
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    status: bool = True
    message: str
    data: T | None = None
