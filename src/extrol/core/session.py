"""Session domain types."""

from dataclasses import dataclass, field


@dataclass
class User:
    """The signed-in user's profile."""

    id: str = ""
    name: str = ""
    email: str = ""
    extra: dict = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.name or self.email

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        known = {"id", "_id", "name", "email"}
        return cls(
            id=str(data.get("id") or data.get("_id") or ""),
            name=data.get("name") or "",
            email=data.get("email") or "",
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict:
        data = dict(self.extra)
        data.update({"id": self.id, "name": self.name, "email": self.email})
        return data


@dataclass
class Session:
    """A bearer token plus the profile it belongs to."""

    token: str
    user: User
