"""Legacy in-band error records.

Clients of the GraphQL schema expect errors in the shape of a regular result:
the identifying field carries a message literal and every other field the
null-marker. These helpers turn a ``SchedulingError`` into that shape.
"""

from clinic_registry.constants import (
    APPOINTMENT_FULL,
    EXISTING_EVENT,
    INVALID_ID,
    NON_EXISTING_EVENT,
    NULL_MARKER,
)
from clinic_registry.exceptions import SchedulingError, SchedulingErrorKind
from clinic_registry.models.registry_model import DoctorRecord, EventRecord

# kind -> (event field carrying the message, message literal)
_EVENT_SENTINEL_FIELDS: dict[SchedulingErrorKind, tuple[str, str]] = {
    SchedulingErrorKind.INVALID_DOCTOR_ID: ("event_id", INVALID_ID),
    SchedulingErrorKind.DUPLICATE_EVENT_ID: ("event_id", EXISTING_EVENT),
    SchedulingErrorKind.TIME_SLOT_TAKEN: ("appointment_time", APPOINTMENT_FULL),
    SchedulingErrorKind.EVENT_NOT_FOUND: ("event_id", NON_EXISTING_EVENT),
}


def event_sentinel(error: SchedulingError) -> EventRecord:
    """Build the sentinel event for a rejected operation."""
    field, message = _EVENT_SENTINEL_FIELDS[error.kind]
    values = {
        "event_id": NULL_MARKER,
        "patient_name": NULL_MARKER,
        "appointment_time": NULL_MARKER,
    }
    values[field] = message
    return EventRecord(**values)


def event_sentinel_list(error: SchedulingError) -> list[EventRecord]:
    """Build the single-element event list returned by the list-shaped operations."""
    return [event_sentinel(error)]


def doctor_sentinel(error: SchedulingError) -> DoctorRecord:
    """Build the sentinel doctor returned by get-doctor.

    Only an unknown doctor id can reject get-doctor, so any other kind is a
    programming error.
    """
    if error.kind is not SchedulingErrorKind.INVALID_DOCTOR_ID:
        raise ValueError(f"No doctor sentinel for error kind {error.kind}")

    return DoctorRecord(
        doctor_id=INVALID_ID,
        doctor_name=NULL_MARKER,
        clinic_name=NULL_MARKER,
        specialty=NULL_MARKER,
        event=None,
    )
