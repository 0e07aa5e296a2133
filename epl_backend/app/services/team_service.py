"""
Team operations.

A team needs a name, a manager and a stadium.  The stadium is only a
name: deleting or renaming a stadium record leaves teams untouched.
"""

from epl_backend.app.schemas.team import Team, TeamPayload
from epl_backend.app.services.record_service import EntityKind, RecordService


def _team_fields_filled(payload: TeamPayload) -> bool:
    return bool(payload.name and payload.manager and payload.stadium)


TEAM = EntityKind(
    name="Team",
    table="teams",
    payload_model=TeamPayload,
    record_model=Team,
    is_complete=_team_fields_filled,
    add_message="Please fill in all the required fields to add a team",
    update_message="You must fill all of the required fields",
)

team_service: RecordService[TeamPayload, Team] = RecordService(TEAM)

add_team = team_service.add
get_team = team_service.get
update_team = team_service.update
delete_team = team_service.delete
