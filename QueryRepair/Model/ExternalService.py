from dataclasses import dataclass, field
from typing import Any, Dict, Optional

"""Configured code-host integration as reported by the repo-updater service.
    Values are copied through unchanged, timestamps included (RFC 3339 strings).
    `config` carries credentials and is kept out of repr().
"""
@dataclass(frozen=True)
class ExternalServiceRecord:
    id: int
    kind: str
    display_name: str
    config: str = field(repr=False)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ExternalServiceRecord":
        return cls(
            id=data["ID"],
            kind=data.get("Kind", ""),
            display_name=data.get("DisplayName", ""),
            config=data.get("Config", ""),
            created_at=data.get("CreatedAt"),
            updated_at=data.get("UpdatedAt"),
            deleted_at=data.get("DeletedAt") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind,
            "displayName": self.display_name,
            "config": self.config,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "deletedAt": self.deleted_at,
        }
