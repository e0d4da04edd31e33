from sqlalchemy import func, select

from habitdesk.crud import (
    Invalid,
    NotFound,
    create_habit,
    create_strategy,
    delete_habit,
    get_habit_counts,
    get_owned_habit,
    record_checkin,
    toggle_habit_active,
    update_habit,
)
from habitdesk.models import Habit, HabitCheckin
from habitdesk.schemas import HabitIn

from conftest import OTHER, OWNER


def test_create_normalizes_frequency_and_target(db, workspace):
    habit = create_habit(
        db,
        OWNER,
        HabitIn(title="  Ship weekly memo ", frequency="fortnightly", target_count=0, workspace_id=workspace.id),
    )

    assert habit.title == "Ship weekly memo"
    assert habit.frequency == "Daily"
    assert habit.target_count == 1
    assert habit.is_active is True
    assert habit.owner_id == OWNER


def test_create_rejects_workspace_of_another_owner(db, other_workspace):
    result = create_habit(db, OWNER, HabitIn(title="Sneaky", workspace_id=other_workspace.id))

    assert isinstance(result, Invalid)
    assert result.field == "workspace_id"
    assert db.scalar(select(func.count()).select_from(Habit)) == 0


def test_create_rejects_strategy_of_another_owner(db, workspace, other_workspace):
    strategy = create_strategy(db, OTHER, "Flank", other_workspace.id)

    result = create_habit(db, OWNER, HabitIn(title="Linked", workspace_id=workspace.id, strategy_id=strategy.id))

    assert isinstance(result, Invalid)
    assert result.field == "strategy_id"


def test_create_requires_title(db, workspace):
    result = create_habit(db, OWNER, HabitIn(title="   ", workspace_id=workspace.id))

    assert result == Invalid("title", "Title is required.")


def test_update_changes_fields(db, workspace, make_habit):
    habit = make_habit()
    strategy = create_strategy(db, OWNER, "Concentrate forces", workspace.id)

    updated = update_habit(
        db,
        OWNER,
        habit.id,
        HabitIn(
            title="Weekly retro",
            description="Look back",
            frequency="weekly",
            target_count=3,
            is_active=False,
            workspace_id=workspace.id,
            strategy_id=strategy.id,
        ),
    )

    assert updated.frequency == "Weekly"
    assert updated.target_count == 3
    assert updated.is_active is False
    assert updated.strategy_id == strategy.id
    assert updated.description == "Look back"
    assert updated.updated_at is not None


def test_update_by_another_owner_is_not_found(db, make_habit, other_workspace):
    habit = make_habit(title="Mine")

    result = update_habit(db, OTHER, habit.id, HabitIn(title="Theirs", workspace_id=other_workspace.id))

    assert result == NotFound("habit", habit.id)
    db.expire_all()
    assert get_owned_habit(db, OWNER, habit.id).title == "Mine"


def test_toggle_flips_active_flag(db, make_habit):
    habit = make_habit()

    assert toggle_habit_active(db, OWNER, habit.id).is_active is False
    assert toggle_habit_active(db, OWNER, habit.id).is_active is True
    assert isinstance(toggle_habit_active(db, OTHER, habit.id), NotFound)


def test_delete_leaves_checkins_behind(db, make_habit):
    habit = make_habit()
    record_checkin(db, OWNER, habit.id)

    assert delete_habit(db, OWNER, habit.id) is None
    assert get_owned_habit(db, OWNER, habit.id) is None
    assert db.scalar(select(func.count()).select_from(HabitCheckin)) == 1


def test_delete_by_another_owner_is_not_found(db, make_habit):
    habit = make_habit()

    assert delete_habit(db, OTHER, habit.id) == NotFound("habit", habit.id)
    assert get_owned_habit(db, OWNER, habit.id) is not None


def test_habit_counts_are_owner_scoped(db, make_habit, other_workspace):
    make_habit(title="A")
    make_habit(title="B", is_active=False)
    make_habit(title="C", owner_id=OTHER, workspace_id=other_workspace.id)

    assert get_habit_counts(db, OWNER) == {"habits": 2, "active_habits": 1}
    assert get_habit_counts(db, OTHER) == {"habits": 1, "active_habits": 1}


def test_update_without_active_flag_keeps_it(db, workspace, make_habit):
    habit = make_habit(is_active=False)

    updated = update_habit(db, OWNER, habit.id, HabitIn(title="Renamed", workspace_id=workspace.id))

    assert updated.title == "Renamed"
    assert updated.is_active is False


def test_create_without_active_flag_is_active(db, workspace):
    habit = create_habit(db, OWNER, HabitIn(title="Fresh", workspace_id=workspace.id))

    assert habit.is_active is True
