"""
Current Principal

Turns the session's stored role into a typed value so authorization code
never compares raw session strings.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from flask import session

SESSION_ROLE_KEY = 'role'


class Role(str, enum.Enum):
    """Roles recognised by the admin panel."""

    ADMIN = 'ADMIN'


@dataclass(frozen=True)
class Principal:
    """The caller of the current request."""

    role: Optional[Role] = None

    def has_role(self, role):
        return self.role is role

    @classmethod
    def from_session_value(cls, raw):
        """Build a principal from the stored role attribute.

        The string form of ``raw`` must match a role value exactly;
        anything else (including ``None``) gives a principal without a role.
        """
        if raw is None:
            return cls()
        try:
            return cls(role=Role(str(raw)))
        except ValueError:
            return cls()


def current_principal():
    """Return the principal for the active request's session."""
    return Principal.from_session_value(session.get(SESSION_ROLE_KEY))
