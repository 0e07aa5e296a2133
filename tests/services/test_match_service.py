"""Match service: wired like the other kinds."""

import pytest

from epl_backend.app.core.errors import EmptyFieldsError, NotFoundError
from epl_backend.app.schemas.match import Match, MatchPayload
from epl_backend.app.services.match_service import add_match, delete_match, get_match, update_match

DERBY = MatchPayload(
    home_team="Arsenal", away_team="Tottenham", venue="Emirates", match_date=1727604000
)


def test_match_lifecycle(state):
    match = add_match(state, DERBY)
    assert match == Match(id=1, **DERBY.model_dump())
    assert get_match(state, match.id) == match

    rescheduled = update_match(state, match.id, DERBY.model_copy(update={"match_date": 1727690400}))
    assert rescheduled.id == match.id
    assert get_match(state, match.id).match_date == 1727690400

    delete_match(state, match.id)
    with pytest.raises(NotFoundError):
        delete_match(state, match.id)


@pytest.mark.parametrize(
    "update",
    [{"home_team": ""}, {"away_team": ""}, {"venue": ""}, {"match_date": 0}],
)
def test_add_rejects_missing_fields(state, update):
    with pytest.raises(EmptyFieldsError):
        add_match(state, DERBY.model_copy(update=update))
    assert len(state.matches) == 0
    assert state.allocator.peek() == 0


def test_update_rejects_zero_date(state):
    match = add_match(state, DERBY)
    with pytest.raises(EmptyFieldsError):
        update_match(state, match.id, DERBY.model_copy(update={"match_date": 0}))
    assert get_match(state, match.id) == match
