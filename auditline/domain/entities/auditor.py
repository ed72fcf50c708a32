"""Auditor entity — one canonical identity behind many name spellings."""

from dataclasses import dataclass, field


@dataclass
class Auditor:
    id: int
    display_name: str
    key: str
    members: set[str] = field(default_factory=set)

    @property
    def first_token(self) -> str:
        return self.key.split(" ", 1)[0]

    def rename(self, display_name: str, key: str) -> None:
        """Grow to a longer variant; earlier memberships stay attached."""
        self.display_name = display_name
        self.key = key
        self.members.add(key)
