"""
Selection store unit tests - upsert semantics, validation, batches, threading
"""
import threading
from datetime import date

import pytest

from canteen.models.selection import SelectionInput, Shift
from canteen.services.selection_store import SelectionStore, SelectionValidationError


def test_new_pair_adds_one_entry(store, asha_entry):
    record = store.add_selection(asha_entry)

    assert len(store) == 1
    assert record.employee == "Asha"
    assert record.shift == Shift.GENERAL
    assert record.date == date(2024, 5, 1)
    assert record.id
    assert store.dashboard().total_entries == 1


def test_same_pair_replaces_in_place(store, asha_entry):
    first = store.add_selection(asha_entry)

    second = store.add_selection({
        **asha_entry,
        "shift": "evening",
        "meals": {"breakfast": False, "lunch": True, "dinner": False},
        "remarks": "No onions",
    })

    assert len(store) == 1
    assert second.id == first.id
    assert second.shift == Shift.EVENING
    assert second.meals.lunch is True
    assert second.meals.breakfast is False
    assert second.remarks == "No onions"
    assert second.submitted_at >= first.submitted_at

    totals = store.dashboard().totals
    assert (totals.breakfast, totals.lunch, totals.dinner) == (0, 1, 0)


def test_resubmission_without_remarks_clears_them(store, asha_entry):
    store.add_selection({**asha_entry, "remarks": "Jain meal"})
    record = store.add_selection(asha_entry)
    assert record.remarks is None


def test_employee_is_trimmed_for_key(store, asha_entry):
    store.add_selection(asha_entry)
    store.add_selection({**asha_entry, "employee": "  Asha  "})
    assert len(store) == 1
    assert store.list_selections()[0].employee == "Asha"


def test_different_date_is_separate_entry(store, asha_entry):
    store.add_selection(asha_entry)
    store.add_selection({**asha_entry, "date": "2024-05-02"})
    assert len(store) == 2


def test_invalid_shift_rejected_without_mutation(store, asha_entry):
    store.add_selection(asha_entry)
    with pytest.raises(SelectionValidationError):
        store.add_selection({**asha_entry, "shift": "night", "date": "2024-05-02"})
    assert len(store) == 1


def test_missing_meals_rejected(store, asha_entry):
    entry = {k: v for k, v in asha_entry.items() if k != "meals"}
    with pytest.raises(SelectionValidationError):
        store.add_selection(entry)
    assert len(store) == 0


@pytest.mark.parametrize("field", ["employee", "department", "date"])
def test_blank_required_text_rejected(store, asha_entry, field):
    with pytest.raises(SelectionValidationError):
        store.add_selection({**asha_entry, field: "   "})
    assert len(store) == 0


def test_malformed_date_rejected(store, asha_entry):
    with pytest.raises(SelectionValidationError):
        store.add_selection({**asha_entry, "date": "May first"})


def test_validation_error_message_is_generic(store, asha_entry):
    with pytest.raises(SelectionValidationError) as exc_info:
        store.add_selection({**asha_entry, "shift": "night"})
    assert str(exc_info.value) == "Missing required fields"
    assert "shift" in exc_info.value.detail


def test_remarks_clipped_to_limit(store, asha_entry):
    record = store.add_selection({**asha_entry, "remarks": "x" * 300})
    assert len(record.remarks) == 180


def test_accepts_decoded_input(store, asha_entry):
    record = store.add_selection(SelectionInput.model_validate(asha_entry))
    assert record.department == "Design"


def test_batch_rejected_whole_when_one_entry_invalid(store, asha_entry):
    with pytest.raises(SelectionValidationError):
        store.add_selections([
            asha_entry,
            {**asha_entry, "employee": "Ravi", "shift": "night"},
        ])
    assert len(store) == 0


def test_batch_upserts_each_entry(store, asha_entry):
    results = store.add_selections([
        asha_entry,
        {**asha_entry, "date": "2024-05-02"},
        {**asha_entry, "employee": "Ravi"},
    ])
    assert len(results) == 3
    assert len(store) == 3


def test_returned_records_are_copies(store, asha_entry):
    record = store.add_selection(asha_entry)
    record.meals.lunch = True
    store.list_selections()[0].meals.dinner = False

    stored = store.list_selections()[0]
    assert stored.meals.lunch is False
    assert stored.meals.dinner is True


def test_list_filters_by_employee(store, asha_entry):
    store.add_selection(asha_entry)
    store.add_selection({**asha_entry, "employee": "Ravi"})

    assert [s.employee for s in store.list_selections(employee="Ravi")] == ["Ravi"]
    assert len(store.list_selections()) == 2


def test_blank_employee_filter_returns_all(store, asha_entry):
    store.add_selection(asha_entry)
    store.add_selection({**asha_entry, "employee": "Ravi"})

    assert len(store.list_selections(employee="   ")) == 2
    selections, dashboard = store.snapshot(employee="   ")
    assert len(selections) == 2


def test_snapshot_filter_keeps_full_dashboard(store, asha_entry):
    store.add_selection(asha_entry)
    store.add_selection({**asha_entry, "employee": "Ravi"})

    selections, dashboard = store.snapshot(employee=" Ravi ")
    assert [s.employee for s in selections] == ["Ravi"]
    assert dashboard.total_entries == 2


def test_listing_keeps_first_submission_order(store, asha_entry):
    store.add_selection(asha_entry)
    store.add_selection({**asha_entry, "employee": "Ravi"})
    store.add_selection({**asha_entry, "meals": {"lunch": True}})

    assert [s.employee for s in store.list_selections()] == ["Asha", "Ravi"]


def test_concurrent_submissions_for_same_pair(store, asha_entry):
    variants = [
        {"breakfast": True, "lunch": True, "dinner": True},
        {"breakfast": False, "lunch": False, "dinner": False},
    ]

    def submit(meals):
        for _ in range(50):
            store.add_selection({**asha_entry, "meals": meals})

    threads = [threading.Thread(target=submit, args=(m,)) for m in variants]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1
    meals = store.list_selections()[0].meals
    assert meals.model_dump() in variants
