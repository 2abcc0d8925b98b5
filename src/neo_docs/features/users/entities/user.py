"""User as seen by the access controllers."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ....config.constants import Role
from ...permissions.entities.roles import coerce_role


@dataclass(frozen=True)
class User:
    """Actor identity and role. Account data lives in the user directory."""

    id: str
    role: Optional[Role]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "User":
        return cls(id=str(data["id"]), role=coerce_role(data.get("role")))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "role": self.role.value if self.role else None}
