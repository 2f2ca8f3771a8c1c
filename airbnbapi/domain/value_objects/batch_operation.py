"""Batch sub-operation value object.

The upstream batch endpoint (``POST /v2/batch``) accepts a list of
sub-operations, each a method + path + query. Paths are relative to the
API version root, e.g. ``/calendar_days``.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class BatchOperation:
    """One sub-operation inside a batch request.

    Attributes:
        method: HTTP method of the sub-operation.
        path: Path relative to the API version root.
        query: Query parameters of the sub-operation.
    """

    method: str
    path: str
    query: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"Batch operation path must start with '/': {self.path}")
        object.__setattr__(self, "method", self.method.upper())

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire format of the batch endpoint."""
        return {
            "method": self.method,
            "path": self.path,
            "query": dict(self.query),
        }
