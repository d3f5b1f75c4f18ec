"""
Doctors API - schedule management over REST.

This module provides REST endpoints for:
- Reading a doctor and listing their events
- Booking, cancelling and renaming appointments

All endpoints delegate to ScheduleService. Rejected operations surface as
HTTP errors through the registered SchedulingError handler.
"""

from fastapi import APIRouter, Depends, status

from clinic_registry.api.dependencies import service
from clinic_registry.models.registry_model import DoctorRecord, EventCreateInput, EventRecord, PatientNameUpdate
from clinic_registry.services.schedule_service import ScheduleService

router = APIRouter()

schedule_dependency = Depends(service(ScheduleService))


@router.get("/doctors/{doctor_id}", response_model=DoctorRecord)
def get_doctor(
    doctor_id: str,
    schedule_service: ScheduleService = schedule_dependency,
) -> DoctorRecord:
    """Get a doctor and their schedule.

    Raises:
        InvalidDoctorIdError: If the doctor does not exist (404)
    """
    return schedule_service.get_doctor(doctor_id)


@router.get("/doctors/{doctor_id}/events", response_model=list[EventRecord])
def list_events(
    doctor_id: str,
    schedule_service: ScheduleService = schedule_dependency,
) -> list[EventRecord]:
    """List a doctor's events in insertion order."""
    return schedule_service.list_events(doctor_id)


@router.post("/doctors/{doctor_id}/events", response_model=list[EventRecord], status_code=status.HTTP_201_CREATED)
def create_event(
    doctor_id: str,
    event: EventCreateInput,
    schedule_service: ScheduleService = schedule_dependency,
) -> list[EventRecord]:
    """Book a new appointment.

    Args:
        doctor_id: Id of the doctor
        event: Event id, patient name and time slot of the appointment
        schedule_service: Schedule service instance

    Returns:
        The doctor's updated events

    Raises:
        InvalidDoctorIdError: If the doctor does not exist (404)
        DuplicateEventIdError: If the event id is taken (409)
        TimeSlotTakenError: If the time slot is booked (409)
    """
    return schedule_service.create_event(doctor_id, event.event_id, event.patient_name, event.appointment_time)


@router.delete("/doctors/{doctor_id}/events/{event_id}", response_model=list[EventRecord])
def delete_event(
    doctor_id: str,
    event_id: str,
    schedule_service: ScheduleService = schedule_dependency,
) -> list[EventRecord]:
    """Cancel an appointment and return the remaining events."""
    return schedule_service.delete_event(doctor_id, event_id)


@router.patch("/doctors/{doctor_id}/events/{event_id}", response_model=list[EventRecord])
def update_patient_name(
    doctor_id: str,
    event_id: str,
    update: PatientNameUpdate,
    schedule_service: ScheduleService = schedule_dependency,
) -> list[EventRecord]:
    """Change the patient of an appointment."""
    return schedule_service.update_patient_name(doctor_id, event_id, update.new_patient_name)
