"""Who is calling, as seen by access policies."""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    MEMBER = "MEMBER"
    CURATOR = "CURATOR"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Requester:
    """The caller's identity. ``id`` is None for anonymous callers."""

    id: str | None = None
    role: str = Role.MEMBER.value

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @property
    def is_authenticated(self) -> bool:
        return self.id is not None


ANONYMOUS = Requester()
