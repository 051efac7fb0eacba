import pytest

import sanitation.service.complaint.complaint as complaint_module
from sanitation.errors import AuthRequiredError, SelectionRequiredError, ValidationError
from sanitation.model.complaint.complaint_request import ComplaintRequest


def _request(category_id, /, **overrides) -> ComplaintRequest:
    fields = {
        "category_id": category_id,
        "subcategory": "Garbage Overflow",
        "address": "Near Law College Square, Dharampeth",
        "description": "Bin overflowing for three days",
        "reason": ["smell", "stray animals"],
    }
    fields.update(overrides)
    return ComplaintRequest(**fields)


def test_submit_complaint_is_pending(make_category):
    category_id = make_category()

    res = complaint_module.submit_complaint("user-1", _request(category_id))

    assert res.status == "pending"
    assert res.title == "Garbage Overflow"
    assert res.reason == ["smell", "stray animals"]


def test_submit_complaint_requires_login(make_category):
    category_id = make_category()

    with pytest.raises(AuthRequiredError):
        complaint_module.submit_complaint(None, _request(category_id))


@pytest.mark.parametrize("overrides", [{"category_id": None}, {"subcategory": None}, {"subcategory": "  "}])
def test_submit_complaint_requires_selection(make_category, overrides):
    category_id = make_category()

    with pytest.raises(SelectionRequiredError):
        complaint_module.submit_complaint("user-1", _request(category_id, **overrides))


def test_submit_complaint_requires_address(make_category):
    category_id = make_category()

    with pytest.raises(ValidationError):
        complaint_module.submit_complaint("user-1", _request(category_id, address="   "))


def test_photo_url_round_trips(make_category):
    category_id = make_category()
    url = "https://storage.example/complaint-images/user-1/1700000000000.jpg"

    complaint_module.submit_complaint("user-1", _request(category_id, photo_url=url))

    assert complaint_module.list_my_complaints("user-1")[0].photo_url == url


def test_list_my_complaints_is_owner_scoped_newest_first(make_category):
    category_id = make_category()
    first = complaint_module.submit_complaint("user-1", _request(category_id, title="first"))
    complaint_module.submit_complaint("user-2", _request(category_id, title="someone else"))
    second = complaint_module.submit_complaint("user-1", _request(category_id, title="second"))

    mine = complaint_module.list_my_complaints("user-1")

    assert [c.id for c in mine] == [second.id, first.id]


def test_list_categories_returns_subcategories(make_category):
    make_category(name="Drainage", subcategories=["Drainage Problem", "Other"])

    categories = complaint_module.list_categories()

    assert categories[0].name == "Drainage"
    assert categories[0].subcategories == ["Drainage Problem", "Other"]
