"""Tests for role-based access control."""

import pytest

from citywatch.models import Role
from citywatch.reference import CATEGORIES, ROLE_CATEGORIES
from citywatch.services.access import AccessControl


class TestVisibilityTable:
    """Tests for the role -> category table."""

    def test_public_sees_every_category(self):
        assert ROLE_CATEGORIES[Role.PUBLIC] == frozenset(CATEGORIES)

    def test_role_subsets(self, access):
        assert access.categories_visible_to("police") == {"Crime", "Accident"}
        assert access.categories_visible_to("medical") == {"Medical"}
        assert access.categories_visible_to("firefighter") == {"Fire"}

    def test_unknown_role_sees_nothing(self, access):
        assert access.categories_visible_to("admin") == frozenset()
        assert access.categories_visible_to("") == frozenset()
        assert access.categories_visible_to("Police") == frozenset()


class TestFilterByRole:
    """Tests for AccessControl.filter_by_role."""

    def test_public_is_identity(self, access, store):
        """Test that public gets the input unchanged, same order."""
        incidents = store.all()

        result = access.filter_by_role(incidents, "public")

        assert result is incidents
        assert [i.id for i in result] == ["0", "1", "2", "3", "4", "5"]

    def test_public_sees_unknown_categories(self, access, store):
        result = access.filter_by_role(store.all(), Role.PUBLIC)

        assert any(i.category == "Animal" for i in result)

    @pytest.mark.parametrize("role", ["admin", "", "PUBLIC", "dispatcher"])
    def test_unknown_role_fails_closed(self, access, store, role):
        assert access.filter_by_role(store.all(), role) == []

    def test_police_view(self, access, store):
        result = access.filter_by_role(store.all(), "police")

        assert [(i.id, i.category) for i in result] == [("1", "Crime"), ("3", "Accident")]

    def test_medical_partition(self, access, store):
        """Test that Medical incidents are seen by medical only (among non-public roles)."""
        incidents = store.all()
        medical_ids = {i.id for i in incidents if i.category == "Medical"}

        assert {i.id for i in access.filter_by_role(incidents, "medical")} == medical_ids
        for role in ("police", "firefighter"):
            seen = {i.id for i in access.filter_by_role(incidents, role)}
            assert not seen & medical_ids

    def test_filter_does_not_mutate(self, access, store):
        incidents = store.all()
        before = [i.model_dump() for i in incidents]

        access.filter_by_role(incidents, "firefighter")

        assert [i.model_dump() for i in incidents] == before

    def test_injected_table(self, make_incident):
        """Test access control with an injected visibility table."""
        access = AccessControl(visibility={"warden": frozenset({"Garbage"})})
        incidents = [make_incident(id="0", category="Garbage"), make_incident(id="1", category="Fire")]

        assert [i.id for i in access.filter_by_role(incidents, "warden")] == ["0"]
        assert access.filter_by_role(incidents, "firefighter") == []


class TestCanAct:
    """Tests for action rights."""

    def test_public_never_acts(self, access, make_incident):
        assert access.can_act(make_incident(category="Fire"), "public") is False

    def test_unknown_role_never_acts(self, make_incident):
        access = AccessControl(enforce_write_scope=False)

        assert access.can_act(make_incident(), "admin") is False

    def test_write_scope_enforced(self, access, make_incident):
        fire = make_incident(category="Fire")

        assert access.can_act(fire, "firefighter") is True
        assert access.can_act(fire, "police") is False
        assert "Fire" not in access.authorization_error(fire, "police")

    def test_write_scope_relaxed(self, make_incident):
        """Test the legacy policy: any known non-public role may act."""
        access = AccessControl(enforce_write_scope=False)
        fire = make_incident(category="Fire")

        assert access.can_act(fire, "police") is True
        assert access.can_act(fire, "medical") is True
        assert access.can_act(fire, "public") is False

    def test_write_never_broader_than_read(self, access, store):
        """Test that with write scope enforced, can_act implies can_view."""
        for incident in store.all():
            for role in Role:
                if access.can_act(incident, role):
                    assert access.can_view(incident, role)
