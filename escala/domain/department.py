"""Department entity - a sector that service orders are executed in."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    """A department. The name is unique among active departments."""

    id: int
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "Department":
        """Creates a Department from an API record."""
        return cls(id=int(data["id"]), name=data.get("name") or "")

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
