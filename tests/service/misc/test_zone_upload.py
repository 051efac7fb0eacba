import io

import pytest

import sanitation.service.upload.upload as upload_module
from sanitation.errors import AuthRequiredError, ValidationError
from sanitation.service.zone.zone import WEEKDAYS, list_zones


def test_list_zones_full_week():
    zones = list_zones()

    assert len(zones) == 10
    assert all([slot.day for slot in zone.schedule] == list(WEEKDAYS) for zone in zones)
    assert [slot.type for slot in zones[0].schedule] == ["wet", "dry", "wet", "dry", "both", "wet"]


@pytest.mark.parametrize("day", [None, "", "all", "ALL"])
def test_list_zones_all_days(day):
    assert all(len(zone.schedule) == 6 for zone in list_zones(day))


def test_list_zones_single_day():
    zones = list_zones("Tuesday")

    assert all(len(zone.schedule) == 1 and zone.schedule[0].type == "dry" for zone in zones)


def test_list_zones_unknown_day():
    with pytest.raises(ValidationError):
        list_zones("Funday")


def test_validate_image_rejects_large_file():
    with pytest.raises(ValidationError, match="smaller than 5MB"):
        upload_module.validate_image("image/jpeg", 5 * 1024 * 1024 + 1)


def test_validate_image_accepts_limit():
    upload_module.validate_image("image/jpeg", 5 * 1024 * 1024)


def test_object_path_keeps_extension(monkeypatch):
    monkeypatch.setattr(upload_module.time, "time", lambda: 1700000000.5)

    assert upload_module.object_path("user-1", "Drain.JPEG") == "user-1/1700000000500.jpeg"
    assert upload_module.object_path("user-1", "noext") == "user-1/1700000000500.bin"


def test_upload_image_requires_login():
    with pytest.raises(AuthRequiredError):
        upload_module.upload_image(None, "complaint-images", "a.png", "image/png", io.BytesIO(b"x"), 1)
