"""GraphQL types for the clinic registry.

Field and type names follow the legacy schema: ``Doctor.event`` holds the
schedule and the delete mutation takes a ``deleteInput`` record.
"""

import strawberry

from clinic_registry.models.registry_model import DeleteEventInput, DoctorRecord, EventRecord


@strawberry.experimental.pydantic.type(model=EventRecord)
class Event:
    """An appointment in a doctor's schedule."""

    event_id: strawberry.ID
    patient_name: strawberry.auto
    appointment_time: strawberry.auto


@strawberry.experimental.pydantic.type(model=DoctorRecord)
class Doctor:
    """A doctor and their schedule."""

    doctor_id: strawberry.ID
    doctor_name: strawberry.auto
    clinic_name: strawberry.auto
    specialty: strawberry.auto
    event: list[Event] | None


@strawberry.experimental.pydantic.type(
    model=DeleteEventInput,
    is_input=True,
    name="deleteInput",
)
class DeleteInput:
    """GraphQL input identifying the event to delete."""

    doctor_id: strawberry.ID
    event_id: strawberry.ID
