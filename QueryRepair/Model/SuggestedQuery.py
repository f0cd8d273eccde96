from dataclasses import dataclass
from typing import Dict

"""Corrected candidate query proposed for a raw query that failed to parse."""
@dataclass(frozen=True)
class SuggestedQuery:
    description: str
    query: str

    def __post_init__(self):
        if not self.description:
            raise ValueError("description must not be empty")

    def to_dict(self) -> Dict[str, str]:
        return {"description": self.description, "query": self.query}
