import datetime

import pytest

from notice.models import Notice


@pytest.mark.django_db
def test_to_dict_uses_api_field_names():
    notice = Notice.objects.create(title="Holiday", category="General", date="2024-12-25")

    data = notice.to_dict()

    assert set(data) == {"id", "title", "category", "date", "createdAt"}
    assert data["id"] == notice.pk
    assert isinstance(data["createdAt"], datetime.datetime)


@pytest.mark.django_db
def test_default_ordering_breaks_ties_by_id():
    created_at = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
    older = Notice.objects.create(title="A", category="General", date="x", created_at=created_at)
    newer = Notice.objects.create(title="B", category="General", date="x", created_at=created_at)

    assert list(Notice.objects.all()) == [newer, older]


def test_str_is_title():
    assert str(Notice(title="Holiday")) == "Holiday"
