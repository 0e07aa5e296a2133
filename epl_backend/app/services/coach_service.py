"""Coach operations."""

from epl_backend.app.schemas.coach import Coach, CoachPayload
from epl_backend.app.services.record_service import EntityKind, RecordService


def _coach_fields_filled(payload: CoachPayload) -> bool:
    return bool(payload.name and payload.team)


COACH = EntityKind(
    name="Coach",
    table="coaches",
    payload_model=CoachPayload,
    record_model=Coach,
    is_complete=_coach_fields_filled,
    add_message="You must fill in all the required fields",
    update_message="You must fill in all the required fields",
)

coach_service: RecordService[CoachPayload, Coach] = RecordService(COACH)

add_coach = coach_service.add
get_coach = coach_service.get
update_coach = coach_service.update
delete_coach = coach_service.delete
