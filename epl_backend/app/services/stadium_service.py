"""
Stadium operations.

Besides a name and a location, a stadium must have a nonzero
capacity.  A zero capacity is reported like an empty field.
"""

from epl_backend.app.schemas.stadium import Stadium, StadiumPayload
from epl_backend.app.services.record_service import EntityKind, RecordService


def _stadium_fields_filled(payload: StadiumPayload) -> bool:
    return bool(payload.name and payload.location) and payload.capacity != 0


STADIUM = EntityKind(
    name="Stadium",
    table="stadiums",
    payload_model=StadiumPayload,
    record_model=Stadium,
    is_complete=_stadium_fields_filled,
    add_message="Please fill in all the required fields",
    update_message="Please fill in all the required fields",
)

stadium_service: RecordService[StadiumPayload, Stadium] = RecordService(STADIUM)

add_stadium = stadium_service.add
get_stadium = stadium_service.get
update_stadium = stadium_service.update
delete_stadium = stadium_service.delete
