from datetime import date, timedelta

import pytest

import sanitation.config.config as configs
import sanitation.service.event.event as event_module
from sanitation.errors import AlreadyRegisteredError, AuthRequiredError, NotFoundError, ValidationError
from sanitation.model.event.event_request import EventRequest


def _event_request(**overrides) -> EventRequest:
    fields = {
        "name": "Futala Lake Clean-up",
        "organizer": "Ward 12 Residents",
        "venue": "Futala Lake",
        "date": date.today() + timedelta(days=3),
        "category": "drive",
    }
    fields.update(overrides)
    return EventRequest(**fields)


def test_submit_event_is_created_unapproved(engine):
    res = event_module.submit_event("user-1", _event_request())

    assert res.id > 0
    assert res.is_approved is False


@pytest.mark.parametrize(
    "overrides",
    [{"name": "ab"}, {"organizer": "A"}, {"venue": "Lake"}, {"name": "   "}],
)
def test_submit_event_validates_lengths(engine, overrides):
    with pytest.raises(ValidationError):
        event_module.submit_event("user-1", _event_request(**overrides))


def test_submit_event_requires_login(engine):
    with pytest.raises(AuthRequiredError):
        event_module.submit_event(None, _event_request())


def test_public_listing_hides_unapproved_events(make_event, monkeypatch):
    monkeypatch.setattr(configs, "EVENTS_REQUIRE_APPROVAL", True)
    make_event(name="Approved Later", date=date.today() + timedelta(days=9))
    make_event(name="Approved Sooner", date=date.today() + timedelta(days=2))
    make_event(name="Pending Review", is_approved=False)

    names = [e.name for e in event_module.list_events()]
    assert names == ["Approved Sooner", "Approved Later"]


def test_listing_can_include_unapproved_events(make_event, monkeypatch):
    monkeypatch.setattr(configs, "EVENTS_REQUIRE_APPROVAL", False)
    make_event(name="Pending Review", is_approved=False, date=date.today() + timedelta(days=1))
    make_event(name="Approved", date=date.today() + timedelta(days=5))

    assert [e.name for e in event_module.list_events()] == ["Pending Review", "Approved"]


def test_upcoming_listing_drops_past_events(make_event):
    make_event(name="Last Month", date=date.today() - timedelta(days=30))
    make_event(name="Next Week", date=date.today() + timedelta(days=7))

    assert [e.name for e in event_module.list_events(upcoming=True)] == ["Next Week"]


def test_register_twice_reports_already_registered(make_event):
    event_id = make_event()
    first = event_module.register_for_event("user-1", event_id)
    assert first.status == "registered"

    with pytest.raises(AlreadyRegisteredError):
        event_module.register_for_event("user-1", event_id)

    assert len(event_module.list_my_registrations("user-1")) == 1


def test_register_unknown_event(engine):
    with pytest.raises(NotFoundError):
        event_module.register_for_event("user-1", 42)


def test_cancel_registration_is_idempotent(make_event):
    event_id = make_event()
    event_module.register_for_event("user-1", event_id)

    event_module.cancel_registration("user-1", event_id)
    event_module.cancel_registration("user-1", event_id)

    assert event_module.list_my_registrations("user-1") == []


def test_cancel_only_touches_callers_registration(make_event):
    event_id = make_event()
    event_module.register_for_event("user-1", event_id)
    event_module.register_for_event("user-2", event_id)

    event_module.cancel_registration("user-1", event_id)

    assert event_module.list_my_registrations("user-1") == []
    assert len(event_module.list_my_registrations("user-2")) == 1


def test_my_registrations_include_event_details(make_event):
    first = make_event(name="Tree Plantation Campaign", venue="Futala Lake")
    second = make_event(name="Waste Segregation Workshop", venue="NMC Community Hall")
    event_module.register_for_event("user-1", first)
    event_module.register_for_event("user-1", second)

    regs = event_module.list_my_registrations("user-1")
    assert [r.event.name for r in regs] == ["Waste Segregation Workshop", "Tree Plantation Campaign"]
    assert regs[0].event.venue == "NMC Community Hall"
