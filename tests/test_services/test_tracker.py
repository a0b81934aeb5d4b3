"""Tests for TrackerService with a pinned clock."""

from datetime import date

import pytest

from cdtracker.exceptions.custom import DuplicateNameError, RecordNotFoundError
from cdtracker.schemas.hotel import HotelFields, HotelUpdate
from cdtracker.services.tracker import TrackerService
from cdtracker.store import HotelStore

TODAY = date(2025, 1, 10)


@pytest.fixture
def service():
    return TrackerService(HotelStore(), clock=lambda: TODAY)


def _fields(name, check_in=date(2025, 1, 1), cd=None):
    return HotelFields(name=name, check_in_date=check_in, custom_cooldown_days=cd)


def test_today_uses_clock(service):
    assert service.today() == TODAY


def test_today_as_of_overrides_clock(service):
    assert service.today(date(2030, 1, 1)) == date(2030, 1, 1)


def test_create_returns_view(service):
    view = service.create(_fields("Hilton"))
    assert view.checkout_date == date(2025, 2, 1)
    assert view.remaining_days == 22


def test_create_duplicate(service):
    service.create(_fields("Plaza"))
    with pytest.raises(DuplicateNameError):
        service.create(_fields("Plaza"))
    assert len(service.store) == 1


def test_list_visible_excludes_expired(service):
    service.create(_fields("Active"))
    service.create(_fields("Expired", check_in=date(2024, 6, 1)))
    result = service.list_visible()
    assert result.as_of == TODAY
    assert [h.name for h in result.hotels] == ["Active"]
    assert result.total == 1


def test_list_visible_with_query(service):
    service.create(_fields("Hilton"))
    service.create(_fields("Plaza"))
    result = service.list_visible("hil")
    assert [h.name for h in result.hotels] == ["Hilton"]
    assert result.query == "hil"


def test_list_visible_as_of_checkout_date(service):
    service.create(_fields("Hilton"))
    assert service.list_visible(as_of=date(2025, 2, 1)).hotels == []


def test_history_includes_expired(service):
    service.create(_fields("Active"))
    service.create(_fields("Expired", check_in=date(2024, 6, 1)))
    result = service.history()
    assert [h.name for h in result.hotels] == ["Active", "Expired"]
    assert result.hotels[1].is_expired is True


def test_detail(service):
    created = service.create(_fields("Hilton", cd=3))
    view = service.detail(created.id)
    assert view.checkout_date == date(2025, 1, 5)
    assert view.is_expired is True


def test_detail_unknown(service):
    with pytest.raises(RecordNotFoundError):
        service.detail("missing")


def test_update_and_delete(service):
    created = service.create(_fields("Hilton"))
    view = service.update(created.id, HotelUpdate(check_in_date=date(2025, 1, 5)))
    assert view.checkout_date == date(2025, 2, 5)
    assert service.delete(created.id) is True
    assert service.delete(created.id) is False


def test_urgent_threshold_from_service():
    service = TrackerService(HotelStore(), clock=lambda: TODAY, urgent_threshold_days=30)
    view = service.create(_fields("Hilton"))
    assert view.is_urgent is True
