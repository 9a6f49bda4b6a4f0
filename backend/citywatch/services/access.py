"""Role-based visibility and action rights for incidents."""

from collections.abc import Mapping, Sequence

from citywatch.models.incident import Incident, Role
from citywatch.reference import ROLE_CATEGORIES


class AccessControl:
    """
    Decides what a role may see and what it may act on.

    The visibility table is the only place category/role rules live. Rules:

    - public sees everything, unfiltered, and can never act;
    - other known roles see the categories mapped to them;
    - unknown roles see nothing and can never act (fail-closed);
    - with ``enforce_write_scope`` a role may only act on incidents it can
      see. Without it any known non-public role may act on any incident.
    """

    def __init__(
        self,
        visibility: Mapping[str, frozenset[str]] = ROLE_CATEGORIES,
        enforce_write_scope: bool = True,
    ):
        self._visibility = visibility
        self.enforce_write_scope = enforce_write_scope

    def is_known_role(self, role: str) -> bool:
        return role in self._visibility

    def categories_visible_to(self, role: str) -> frozenset[str]:
        """Categories a role may observe. Empty for unknown roles."""
        return frozenset(self._visibility.get(role, frozenset()))

    def filter_by_role(
        self, incidents: Sequence[Incident], role: str
    ) -> Sequence[Incident]:
        """
        Role-scoped view of a collection.

        For public the input is returned as is. For any other role the
        result is the ordered subsequence of visible incidents.
        """
        if role == Role.PUBLIC:
            return incidents

        visible = self.categories_visible_to(role)
        if not visible:
            return []
        return [incident for incident in incidents if incident.category in visible]

    def can_view(self, incident: Incident, role: str) -> bool:
        if role == Role.PUBLIC:
            return True
        return incident.category in self.categories_visible_to(role)

    def authorization_error(self, incident: Incident, role: str) -> str | None:
        """Reason the role may not act on the incident, or None if it may."""
        if not self.is_known_role(role):
            return f"Unknown role {role!r} may not change incident status"
        if role == Role.PUBLIC:
            return "Public viewers have read-only access"
        if self.enforce_write_scope and not self.can_view(incident, role):
            return f"Role {role!r} may not act on this incident"
        return None

    def can_act(self, incident: Incident, role: str) -> bool:
        return self.authorization_error(incident, role) is None
