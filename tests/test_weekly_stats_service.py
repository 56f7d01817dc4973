import itertools

from habit_tracker.models import ActionLog, ActionTemplate, Category
from habit_tracker.services.weekly_stats_service import aggregate_weekly_categories, build_week_stats


def _tally(days_by_category):
    return {
        category: {"days": days_by_category.get(category, 0), "total": 7}
        for category in Category
    }


def test_end_to_end_example_ignores_duplicate_day():
    records = [
        {"actionId": "A", "dateKey": "2024-01-02"},
        {"actionId": "A", "dateKey": "2024-01-02"},
        {"actionId": "B", "dateKey": "2024-01-03"},
    ]
    result = aggregate_weekly_categories(records, {"A": "study", "B": "study"})
    assert result[Category.STUDY] == {"days": 2, "total": 7}
    assert result == _tally({Category.STUDY: 2})


def test_different_actions_same_category_same_day_count_once():
    records = [
        {"actionId": "run", "dateKey": "2024-01-02"},
        {"actionId": "swim", "dateKey": "2024-01-02"},
    ]
    result = aggregate_weekly_categories(records, {"run": "exercise", "swim": "exercise"})
    assert result[Category.EXERCISE]["days"] == 1


def test_every_category_present_even_without_records():
    assert aggregate_weekly_categories([], {}) == _tally({})


def test_unknown_id_and_unknown_label_fold_into_other():
    records = [
        {"actionId": "missing", "dateKey": "2024-01-02"},
        {"actionId": "legacy", "dateKey": "2024-01-04"},
    ]
    result = aggregate_weekly_categories(records, {"legacy": "meditation"})
    assert result == _tally({Category.OTHER: 2})


def test_missing_lookup_degrades_to_default_category():
    records = [{"actionId": "A", "dateKey": "2024-01-02"}, {"actionId": "B", "dateKey": "2024-01-03"}]
    assert aggregate_weekly_categories(records, None) == _tally({Category.OTHER: 2})


def test_lookup_errors_degrade_per_record():
    def category_of(action_id):
        if action_id == "A":
            return "exercise"
        raise KeyError(action_id)

    records = [{"actionId": "A", "dateKey": "2024-01-02"}, {"actionId": "B", "dateKey": "2024-01-03"}]
    assert aggregate_weekly_categories(records, category_of) == _tally(
        {Category.EXERCISE: 1, Category.OTHER: 1}
    )


def test_order_independent_and_deterministic():
    records = [
        {"actionId": "A", "dateKey": "2024-01-01"},
        {"actionId": "B", "dateKey": "2024-01-01"},
        {"actionId": "C", "dateKey": "2024-01-02"},
        {"actionId": "A", "dateKey": "2024-01-05"},
        {"actionId": "D", "dateKey": "2024-01-06"},
    ]
    mapping = {"A": "exercise", "B": "study", "C": "study", "D": "unknown"}
    expected = aggregate_weekly_categories(records, mapping)
    for permutation in itertools.permutations(records):
        assert aggregate_weekly_categories(list(permutation), mapping) == expected
    assert expected == _tally({Category.EXERCISE: 2, Category.STUDY: 2, Category.OTHER: 1})


def test_accepts_action_log_rows():
    rows = [ActionLog(action_id="A", date_key="2024-01-02"), ActionLog(action_id="A", date_key="2024-01-03")]
    assert aggregate_weekly_categories(rows, {"A": Category.EXERCISE})[Category.EXERCISE]["days"] == 2


def test_build_week_stats_filters_to_closed_week_range(db):
    db.add(ActionTemplate(id="A", name="Read", category="study"))
    db.add(ActionTemplate(id="B", name="Run", category="exercise"))
    for action_id, date_key in [
        ("A", "2023-12-31"),  # Sunday of previous week
        ("A", "2024-01-01"),  # Monday, inclusive start
        ("A", "2024-01-07"),  # Sunday, inclusive end
        ("B", "2024-01-03"),
        ("B", "2024-01-08"),  # next week
    ]:
        db.add(ActionLog(action_id=action_id, date_key=date_key))
    db.commit()

    stats = build_week_stats(db, "2024-01-04")

    assert stats["weekStart"] == "2024-01-01"
    assert stats["weekEnd"] == "2024-01-07"
    assert stats["data"] == {
        "exercise": {"days": 1, "total": 7},
        "study": {"days": 2, "total": 7},
        "other": {"days": 0, "total": 7},
    }
