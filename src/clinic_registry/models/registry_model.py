"""Doctor and event models shared by the store, the services and the API layers."""

from pydantic import BaseModel, ConfigDict, Field


class EventRecord(BaseModel):
    """An appointment in a doctor's schedule.

    Records are immutable; a rename produces a replacement record.
    """

    model_config = ConfigDict(frozen=True)

    event_id: str
    patient_name: str
    appointment_time: str


class DoctorRecord(BaseModel):
    """A doctor and the ordered list of events making up their schedule.

    ``event`` keeps the name of the legacy schema field. It is ``None`` only on
    the invalid-id sentinel.
    """

    doctor_id: str
    doctor_name: str
    clinic_name: str
    specialty: str
    event: list[EventRecord] | None = Field(default_factory=list)


class EventCreateInput(BaseModel):
    """Body of a create-event request (the doctor comes from the path)."""

    event_id: str
    patient_name: str
    appointment_time: str


class DeleteEventInput(BaseModel):
    """Grouped input identifying the event to delete."""

    doctor_id: str
    event_id: str


class PatientNameUpdate(BaseModel):
    """Body of an update-patient-name request."""

    new_patient_name: str
