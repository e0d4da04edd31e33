from datetime import date, timedelta

import pytest
from sqlalchemy import event

from habitdesk.crud import (
    HabitFilters,
    NotFound,
    aggregate_progress,
    create_strategy,
    get_habit_with_progress,
    list_habits_with_progress,
    record_checkin,
)

from conftest import OTHER, OWNER

TODAY = date(2024, 3, 14)
THREE_DAYS_AGO = TODAY - timedelta(days=3)


@pytest.fixture
def statements(engine):
    seen = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", _record)
    yield seen
    event.remove(engine, "before_cursor_execute", _record)


def _checkin(db, habit, day, times=1):
    for _ in range(times):
        record_checkin(db, OWNER, habit.id, today=day)


def test_batch_aggregation_groups_per_habit(db, make_habit, statements):
    daily = make_habit(title="H1", frequency="Daily", target_count=1)
    weekly = make_habit(title="H2", frequency="Weekly", target_count=5)
    _checkin(db, daily, TODAY)
    _checkin(db, weekly, THREE_DAYS_AGO, times=2)
    statements.clear()

    h1, h2 = aggregate_progress(db, OWNER, [daily, weekly], today=TODAY)

    assert (h1.period_count, h1.today_count) == (1, 1)
    assert (h2.period_count, h2.today_count) == (2, 0)
    assert (h1.period_start, h1.period_end) == (TODAY, TODAY)
    assert (h2.period_start, h2.period_end) == (date(2024, 3, 11), date(2024, 3, 17))
    checkin_queries = [s for s in statements if "FROM habit_checkins" in s]
    assert len(checkin_queries) == 1


def test_rows_inside_union_but_outside_own_window_are_ignored(db, make_habit):
    daily = make_habit(title="Daily", frequency="Daily", target_count=5)
    weekly = make_habit(title="Weekly", frequency="Weekly", target_count=5)
    _checkin(db, daily, THREE_DAYS_AGO, times=2)
    _checkin(db, daily, TODAY)

    by_title = {p.title: p for p in aggregate_progress(db, OWNER, [daily, weekly], today=TODAY)}

    assert by_title["Daily"].period_count == 1
    assert by_title["Daily"].today_count == 1
    assert by_title["Weekly"].period_count == 0


def test_previous_week_does_not_count(db, make_habit):
    weekly = make_habit(frequency="Weekly", target_count=3)
    _checkin(db, weekly, date(2024, 3, 10))
    _checkin(db, weekly, date(2024, 3, 11))

    (progress,) = aggregate_progress(db, OWNER, [weekly], today=TODAY)

    assert progress.period_count == 1


def test_habits_without_checkins_report_zero(db, make_habit):
    habit = make_habit()

    (progress,) = aggregate_progress(db, OWNER, [habit], today=TODAY)

    assert progress.period_count == 0
    assert progress.today_count == 0


def test_empty_habit_set_returns_empty_list_without_querying(db, statements):
    assert aggregate_progress(db, OWNER, [], today=TODAY) == []
    assert statements == []


def test_list_ordering_active_then_daily_then_title(db, make_habit):
    make_habit(title="Zeta", frequency="Weekly")
    make_habit(title="Alpha", frequency="Daily")
    make_habit(title="Beta", frequency="Daily", is_active=False)

    titles = [p.title for p in list_habits_with_progress(db, OWNER, today=TODAY)]

    assert titles == ["Alpha", "Zeta", "Beta"]


def test_list_is_owner_scoped(db, make_habit, other_workspace):
    make_habit(title="Mine")
    make_habit(title="Theirs", owner_id=OTHER, workspace_id=other_workspace.id)

    assert [p.title for p in list_habits_with_progress(db, OWNER, today=TODAY)] == ["Mine"]


def test_list_with_no_habits_is_empty(db):
    assert list_habits_with_progress(db, OWNER, today=TODAY) == []


def test_list_filters(db, workspace, make_habit):
    strategy = create_strategy(db, OWNER, "Hold the center", workspace.id)
    make_habit(title="Pipeline review", frequency="Weekly", description="Sales funnel")
    make_habit(title="Inbox zero", strategy_id=strategy.id)

    def titles(**kwargs):
        return [p.title for p in list_habits_with_progress(db, OWNER, HabitFilters(**kwargs), today=TODAY)]

    assert titles(frequency="weekly") == ["Pipeline review"]
    assert titles(frequency="bogus") == ["Inbox zero", "Pipeline review"]
    assert titles(strategy_id=strategy.id) == ["Inbox zero"]
    assert titles(q="funnel") == ["Pipeline review"]
    assert titles(q="INBOX") == ["Inbox zero"]
    assert titles(workspace_id=workspace.id + 100) == []


def test_list_carries_workspace_and_strategy_names(db, workspace, make_habit):
    strategy = create_strategy(db, OWNER, "Strike first", workspace.id)
    make_habit(title="Call a customer", strategy_id=strategy.id)

    (progress,) = list_habits_with_progress(db, OWNER, today=TODAY)

    assert progress.workspace_name == "Growth"
    assert progress.strategy_name == "Strike first"


def test_detail_sums_current_period(db, make_habit):
    weekly = make_habit(frequency="Weekly", target_count=4)
    _checkin(db, weekly, date(2024, 3, 10))
    _checkin(db, weekly, date(2024, 3, 11), times=2)
    _checkin(db, weekly, TODAY)

    progress = get_habit_with_progress(db, OWNER, weekly.id, today=TODAY)

    assert progress.period_count == 3
    assert progress.today_count == 1
    assert progress.period_start == date(2024, 3, 11)
    assert progress.period_end == date(2024, 3, 17)


def test_detail_without_checkins_is_zero(db, make_habit):
    habit = make_habit()

    progress = get_habit_with_progress(db, OWNER, habit.id, today=TODAY)

    assert (progress.period_count, progress.today_count) == (0, 0)


def test_detail_of_another_owners_habit_is_not_found(db, make_habit):
    habit = make_habit()

    assert get_habit_with_progress(db, OTHER, habit.id, today=TODAY) == NotFound("habit", habit.id)
