"""Scheduling errors raised by the operation handlers.

Every rejected operation raises a ``SchedulingError`` subclass. The error
kind decides which legacy sentinel record the GraphQL boundary returns and
which HTTP status the REST boundary answers with.
"""

from enum import StrEnum


class SchedulingErrorKind(StrEnum):
    """The recognized reasons an operation is rejected."""

    INVALID_DOCTOR_ID = "InvalidDoctorId"
    DUPLICATE_EVENT_ID = "DuplicateEventId"
    TIME_SLOT_TAKEN = "TimeSlotTaken"
    EVENT_NOT_FOUND = "EventNotFound"


class SchedulingError(Exception):
    """Base class for rejected registry operations."""

    kind: SchedulingErrorKind

    def __init__(self, message: str, doctor_id: str):
        self.doctor_id = doctor_id
        super().__init__(message)


class InvalidDoctorIdError(SchedulingError):
    """Raised when no doctor has the requested id."""

    kind = SchedulingErrorKind.INVALID_DOCTOR_ID

    def __init__(self, doctor_id: str):
        super().__init__(f"Doctor not found: {doctor_id}", doctor_id)


class DuplicateEventIdError(SchedulingError):
    """Raised when creating an event whose id the doctor already uses."""

    kind = SchedulingErrorKind.DUPLICATE_EVENT_ID

    def __init__(self, doctor_id: str, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event {event_id} already exists for doctor {doctor_id}", doctor_id)


class TimeSlotTakenError(SchedulingError):
    """Raised when the requested appointment time is already booked."""

    kind = SchedulingErrorKind.TIME_SLOT_TAKEN

    def __init__(self, doctor_id: str, appointment_time: str):
        self.appointment_time = appointment_time
        super().__init__(f"Doctor {doctor_id} is already booked at {appointment_time}", doctor_id)


class EventNotFoundError(SchedulingError):
    """Raised when the doctor has no event with the requested id."""

    kind = SchedulingErrorKind.EVENT_NOT_FOUND

    def __init__(self, doctor_id: str, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found for doctor {doctor_id}", doctor_id)
