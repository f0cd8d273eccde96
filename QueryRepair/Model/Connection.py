from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")

"""Paging arguments supplied by the caller of a list endpoint."""
@dataclass(frozen=True)
class ConnectionArgs:
    first: Optional[int] = None
    offset: int = 0

    def window(self, items: Sequence[T]) -> "Connection[T]":
        total = len(items)
        start = min(self.offset, total)
        end = total if self.first is None else min(start + self.first, total)
        return Connection(nodes=list(items[start:end]), total_count=total, has_next_page=end < total)


"""One page of results plus the information needed to fetch the next one."""
@dataclass
class Connection(Generic[T]):
    nodes: List[T] = field(default_factory=list)
    total_count: int = 0
    has_next_page: bool = False

    def to_dict(self) -> dict:
        nodes: List[Any] = [n.to_dict() if hasattr(n, "to_dict") else n for n in self.nodes]
        return {
            "nodes": nodes,
            "totalCount": self.total_count,
            "pageInfo": {"hasNextPage": self.has_next_page},
        }
