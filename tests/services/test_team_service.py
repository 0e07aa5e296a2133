"""Team service: add / get / update / delete."""

import logging

import pytest

from epl_backend.app.core.errors import EmptyFieldsError, NotFoundError
from epl_backend.app.schemas.team import Team, TeamPayload
from epl_backend.app.services.team_service import add_team, delete_team, get_team, update_team

ARSENAL = TeamPayload(name="Arsenal", manager="Arteta", stadium="Emirates")


def test_add_team_assigns_first_id(state):
    team = add_team(state, ARSENAL)
    assert team == Team(id=1, name="Arsenal", manager="Arteta", stadium="Emirates")


def test_get_returns_what_add_returned(state):
    team = add_team(state, ARSENAL)
    assert get_team(state, team.id) == team


@pytest.mark.parametrize("field", ["name", "manager", "stadium"])
def test_add_rejects_each_empty_field(state, field):
    payload = ARSENAL.model_copy(update={field: ""})
    with pytest.raises(EmptyFieldsError) as exc_info:
        add_team(state, payload)
    assert exc_info.value.message == "Please fill in all the required fields to add a team"
    assert state.allocator.peek() == 0
    assert len(state.teams) == 0


def test_get_unknown_team(state):
    with pytest.raises(NotFoundError) as exc_info:
        get_team(state, 42)
    assert exc_info.value.message == "Team with ID 42 not found"


def test_get_unknown_team_logs_a_warning(state, caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(NotFoundError):
            get_team(state, 42)
    assert [record.levelno for record in caplog.records] == [logging.WARNING]
    assert "Team 42 not found" in caplog.text


def test_update_replaces_fields_and_keeps_id(state):
    team = add_team(state, ARSENAL)
    updated = update_team(
        state, team.id, TeamPayload(name="Arsenal FC", manager="Wenger", stadium="Highbury")
    )
    assert updated == Team(id=team.id, name="Arsenal FC", manager="Wenger", stadium="Highbury")
    assert get_team(state, team.id) == updated


def test_update_does_not_allocate_ids(state):
    team = add_team(state, ARSENAL)
    update_team(state, team.id, ARSENAL)
    assert state.allocator.peek() == 1


def test_update_validates_before_lookup(state):
    with pytest.raises(EmptyFieldsError) as exc_info:
        update_team(state, 999, TeamPayload(name="", manager="x", stadium="y"))
    assert exc_info.value.message == "You must fill all of the required fields"


def test_update_invalid_leaves_record_unchanged(state):
    team = add_team(state, ARSENAL)
    with pytest.raises(EmptyFieldsError):
        update_team(state, team.id, TeamPayload(name="Arsenal", manager="", stadium="Emirates"))
    assert get_team(state, team.id) == team


def test_update_unknown_team(state):
    with pytest.raises(NotFoundError):
        update_team(state, 3, ARSENAL)
    assert len(state.teams) == 0


def test_delete_is_terminal(state):
    team = add_team(state, ARSENAL)
    assert delete_team(state, team.id) is None
    with pytest.raises(NotFoundError):
        get_team(state, team.id)
    with pytest.raises(NotFoundError):
        delete_team(state, team.id)


def test_duplicate_names_are_allowed(state):
    first = add_team(state, ARSENAL)
    second = add_team(state, ARSENAL)
    assert first.id != second.id
    assert first.name == second.name
