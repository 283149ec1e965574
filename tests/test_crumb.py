from datetime import datetime, timedelta, timezone

import pytest

from crumbs.crumb import Crumb, CrumbState
from crumbs.errors import InvalidStateError, InvalidTransitionError, PropertyNotFoundError

OLD = datetime(2000, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "state",
    ["draft", "pending", "ready", "taken", "pebble", "dust"],
)
def test_set_state_valid(state):
    crumb = Crumb(state=CrumbState.DRAFT, updated_at=OLD)
    crumb.set_state(state)
    assert crumb.state == state
    assert crumb.updated_at > OLD


@pytest.mark.parametrize("state", ["invalid", ""])
def test_set_state_invalid(state):
    crumb = Crumb(state=CrumbState.DRAFT, updated_at=OLD)
    with pytest.raises(InvalidStateError):
        crumb.set_state(state)
    assert crumb.state == CrumbState.DRAFT
    assert crumb.updated_at == OLD


def test_set_state_idempotent():
    crumb = Crumb(state=CrumbState.READY)
    crumb.set_state(CrumbState.READY)
    assert crumb.state == CrumbState.READY


def test_pebble_from_taken():
    crumb = Crumb(state=CrumbState.TAKEN, updated_at=OLD)
    crumb.pebble()
    assert crumb.state == CrumbState.PEBBLE
    assert crumb.updated_at > OLD


@pytest.mark.parametrize("state", ["draft", "pending", "ready", "pebble", "dust"])
def test_pebble_from_other_states_fails(state):
    crumb = Crumb(state=state)
    with pytest.raises(InvalidTransitionError):
        crumb.pebble()
    assert crumb.state == state


@pytest.mark.parametrize("state", ["draft", "pending", "ready", "taken", "pebble", "dust"])
def test_dust_from_any_state(state):
    crumb = Crumb(state=state, updated_at=OLD)
    crumb.dust()
    assert crumb.state == CrumbState.DUST
    assert crumb.updated_at > OLD


def test_set_property_on_new_crumb():
    crumb = Crumb()
    crumb.set_property("priority", 3)
    assert crumb.properties == {"priority": 3}
    assert crumb.updated_at is not None
    assert crumb.updated_at > OLD


def test_set_property_overwrites():
    crumb = Crumb(properties={"priority": 1})
    crumb.set_property("priority", 5)
    assert crumb.properties["priority"] == 5


def test_get_property_returns_value():
    crumb = Crumb(properties={"priority": 3})
    assert crumb.get_property("priority") == 3


def test_get_property_missing():
    with pytest.raises(PropertyNotFoundError):
        Crumb(properties={}).get_property("missing")


def test_get_property_on_new_crumb():
    with pytest.raises(PropertyNotFoundError):
        Crumb().get_property("priority")


def test_get_properties_returns_map():
    crumb = Crumb(properties={"priority": 3, "status": "active"})
    assert len(crumb.get_properties()) == 2


def test_get_properties_empty():
    assert Crumb().get_properties() == {}


def test_clear_property_removes_entry():
    before = datetime.now(timezone.utc) - timedelta(hours=1)
    crumb = Crumb(properties={"priority": 3}, updated_at=before)
    crumb.clear_property("priority")
    assert "priority" not in crumb.properties
    assert crumb.updated_at > before


def test_clear_property_missing():
    with pytest.raises(PropertyNotFoundError):
        Crumb(properties={}).clear_property("missing")


def test_clear_property_on_new_crumb():
    crumb = Crumb()
    with pytest.raises(PropertyNotFoundError):
        crumb.clear_property("priority")
    assert crumb.updated_at is None