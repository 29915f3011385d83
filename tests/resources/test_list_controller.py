from __future__ import annotations

from src.workforce_dashboard.workforce_dashboard.core.exceptions import RemoteError
from src.workforce_dashboard.workforce_dashboard.departments.model import DEPARTMENTS, Department
from src.workforce_dashboard.workforce_dashboard.resources.listing import ListController


class RecordingNotifier:
    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def success(self, message):
        self.messages.append(("success", message))

    def error(self, message):
        self.messages.append(("error", message))

    def info(self, message):
        self.messages.append(("info", message))


class FakeDepartmentsRepo:
    def __init__(self, rows):
        self.rows = list(rows)
        self.fail_with = None
        self.fetch_calls: list[tuple] = []

    def fetch_all(self, order_field=None, *, descending=False):
        self.fetch_calls.append((order_field, descending))
        if self.fail_with:
            raise RemoteError(self.fail_with)
        return sorted(self.rows, key=lambda r: getattr(r, order_field), reverse=descending) if order_field else list(self.rows)


def _rows():
    return [
        Department(2, "Engineering", "Builds the product"),
        Department(1, "Human Resources", None),
        Department(3, "Finance", "Money and engineering budgets"),
    ]


def test_load_orders_by_config_field():
    repo = FakeDepartmentsRepo(_rows())
    listing = ListController(DEPARTMENTS, repo, RecordingNotifier())

    assert listing.load() is True
    assert repo.fetch_calls == [("name", False)]
    assert [d.name for d in listing.items] == ["Engineering", "Finance", "Human Resources"]
    assert listing.loading is False


def test_filter_is_case_insensitive_substring_over_searchable_fields():
    listing = ListController(DEPARTMENTS, FakeDepartmentsRepo(_rows()), RecordingNotifier())
    listing.load()

    assert [d.id for d in listing.filter("ENGINEER")] == [2, 3]
    assert [d.id for d in listing.filter("resources")] == [1]
    assert listing.filter("") == listing.items
    assert listing.filter("zzz") == []


def test_failed_load_keeps_previous_items_and_notifies():
    repo = FakeDepartmentsRepo(_rows())
    notifier = RecordingNotifier()
    listing = ListController(DEPARTMENTS, repo, notifier)
    listing.load()

    repo.fail_with = "connection refused"
    assert listing.load() is False

    assert len(listing.items) == 3
    assert notifier.messages == [("error", "Failed to load departments")]
    assert listing.loading is False


def test_selection_drives_edit_and_delete_availability():
    listing = ListController(DEPARTMENTS, FakeDepartmentsRepo(_rows()), RecordingNotifier())
    listing.load()

    assert listing.can_edit is False
    listing.select(listing.find(3))
    assert listing.can_edit is True and listing.can_delete is True

    listing.discard(3)
    assert listing.selected is None
    assert listing.find(3) is None


def test_empty_messages():
    listing = ListController(DEPARTMENTS, FakeDepartmentsRepo([]), RecordingNotifier())
    listing.load()

    assert listing.empty_message() == "No departments found. Add your first department!"
    assert listing.empty_message("abc") == "No departments match your search."


def test_apply_saved_replaces_or_appends():
    listing = ListController(DEPARTMENTS, FakeDepartmentsRepo(_rows()), RecordingNotifier())
    listing.load()

    listing.apply_saved(Department(1, "People", None))
    listing.apply_saved(Department(9, "Legal", None))

    assert listing.find(1).name == "People"
    assert listing.find(9).name == "Legal"
