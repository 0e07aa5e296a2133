"""
Match operations.

Matches follow the same pattern as the other kinds.  Both team names
and the venue must be filled in and ``match_date`` must be nonzero; as
with teams and stadiums, the names are free text.
"""

from epl_backend.app.schemas.match import Match, MatchPayload
from epl_backend.app.services.record_service import EntityKind, RecordService


def _match_fields_filled(payload: MatchPayload) -> bool:
    return bool(payload.home_team and payload.away_team and payload.venue) and payload.match_date != 0


MATCH = EntityKind(
    name="Match",
    table="matches",
    payload_model=MatchPayload,
    record_model=Match,
    is_complete=_match_fields_filled,
    add_message="Please fill in all the required fields to add a match",
    update_message="You must fill all of the required fields",
)

match_service: RecordService[MatchPayload, Match] = RecordService(MATCH)

add_match = match_service.add
get_match = match_service.get
update_match = match_service.update
delete_match = match_service.delete
