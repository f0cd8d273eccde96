from dataclasses import dataclass
from typing import Any, Dict, Optional

"""Identifies a repository on the code host it was mirrored from."""
@dataclass(frozen=True)
class ExternalRepoSpec:
    id: str
    service_type: str
    service_id: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "serviceType": self.service_type, "serviceID": self.service_id}


"""Repository as known by the repo-updater service."""
@dataclass(frozen=True)
class Repository:
    id: int
    name: str
    external_repo: Optional[ExternalRepoSpec] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Repository":
        ext = data.get("ExternalRepo")
        external_repo = None
        if ext:
            external_repo = ExternalRepoSpec(
                id=ext.get("ID", ""),
                service_type=ext.get("ServiceType", ""),
                service_id=ext.get("ServiceID", ""),
            )
        return cls(id=int(data["ID"]), name=data.get("Name", ""), external_repo=external_repo)
