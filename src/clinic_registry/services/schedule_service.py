"""Service for doctor and schedule operations."""

from functools import lru_cache

from loguru import logger

from clinic_registry.exceptions import (
    DuplicateEventIdError,
    EventNotFoundError,
    InvalidDoctorIdError,
    TimeSlotTakenError,
)
from clinic_registry.models.registry_model import DoctorRecord, EventRecord
from clinic_registry.settings import Settings, get_settings
from clinic_registry.store import RegistryStore, find_event, find_event_at, get_registry_store


class ScheduleService:
    """Query and mutation operations over a RegistryStore.

    Rejected operations raise a ``SchedulingError`` subclass and leave the
    store untouched. Successful mutations return a snapshot of the doctor's
    updated schedule.
    """

    def __init__(self, store: RegistryStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or get_settings()

    def _require_doctor(self, doctor_id: str) -> DoctorRecord:
        doctor = self.store.find_doctor(doctor_id)
        if doctor is None:
            logger.info(f"Service: doctor not found: {doctor_id}")
            raise InvalidDoctorIdError(doctor_id)
        return doctor

    def get_doctor(self, doctor_id: str) -> DoctorRecord:
        """Get a doctor with their schedule.

        Args:
            doctor_id: Id of the doctor

        Returns:
            A copy of the doctor record holding a snapshot of the schedule

        Raises:
            InvalidDoctorIdError: If no doctor has this id
        """
        logger.debug(f"Service: get_doctor with doctor_id={doctor_id}")
        doctor = self._require_doctor(doctor_id)
        with self.store.lock(doctor_id):
            return doctor.model_copy(update={"event": list(doctor.event)})

    def list_events(self, doctor_id: str) -> list[EventRecord]:
        """List a doctor's events in insertion order.

        Raises:
            InvalidDoctorIdError: If no doctor has this id
        """
        logger.debug(f"Service: list_events with doctor_id={doctor_id}")
        doctor = self._require_doctor(doctor_id)
        with self.store.lock(doctor_id):
            return list(doctor.event)

    def create_event(self, doctor_id: str, event_id: str, patient_name: str, appointment_time: str) -> list[EventRecord]:
        """Book a new appointment at the end of a doctor's schedule.

        The event id is checked before the time slot, so a request that
        collides on both reports the duplicate id.

        Args:
            doctor_id: Id of the doctor
            event_id: Id of the new event, unique within this doctor
            patient_name: Name of the patient
            appointment_time: Time slot token, free within this doctor

        Returns:
            The doctor's updated schedule

        Raises:
            InvalidDoctorIdError: If no doctor has this id
            DuplicateEventIdError: If the doctor already has an event with this id
            TimeSlotTakenError: If the time slot is already booked
        """
        logger.debug(f"Service: create_event with doctor_id={doctor_id}, event_id={event_id}, appointment_time={appointment_time}")
        doctor = self._require_doctor(doctor_id)

        with self.store.lock(doctor_id):
            if find_event(doctor, event_id) is not None:
                logger.info(f"Service: create_event - event {event_id} already exists for doctor {doctor_id}")
                raise DuplicateEventIdError(doctor_id, event_id)
            if find_event_at(doctor, appointment_time) is not None:
                logger.info(f"Service: create_event - doctor {doctor_id} already booked at {appointment_time}")
                raise TimeSlotTakenError(doctor_id, appointment_time)

            doctor.event.append(
                EventRecord(event_id=event_id, patient_name=patient_name, appointment_time=appointment_time)
            )
            logger.debug(f"Service: create_event - created event {event_id} for doctor {doctor_id}")
            return list(doctor.event)

    def delete_event(self, doctor_id: str, event_id: str) -> list[EventRecord]:
        """Cancel an appointment.

        Returns:
            The doctor's updated schedule

        Raises:
            InvalidDoctorIdError: If no doctor has this id
            EventNotFoundError: If the doctor has no event with this id
        """
        logger.debug(f"Service: delete_event with doctor_id={doctor_id}, event_id={event_id}")
        doctor = self._require_doctor(doctor_id)

        with self.store.lock(doctor_id):
            if find_event(doctor, event_id) is None:
                logger.info(f"Service: delete_event - event {event_id} not found for doctor {doctor_id}")
                raise EventNotFoundError(doctor_id, event_id)

            doctor.event[:] = [event for event in doctor.event if event.event_id != event_id]
            logger.debug(f"Service: delete_event - deleted event {event_id} for doctor {doctor_id}")
            return list(doctor.event)

    def update_patient_name(self, doctor_id: str, event_id: str, new_patient_name: str) -> list[EventRecord]:
        """Change the patient of an appointment, keeping its id and time slot.

        The replacement record moves to the end of the schedule unless the
        ``rename_in_place`` setting is enabled.

        Returns:
            The doctor's updated schedule

        Raises:
            InvalidDoctorIdError: If no doctor has this id
            EventNotFoundError: If the doctor has no event with this id
        """
        logger.debug(f"Service: update_patient_name with doctor_id={doctor_id}, event_id={event_id}")
        doctor = self._require_doctor(doctor_id)

        with self.store.lock(doctor_id):
            existing = find_event(doctor, event_id)
            if existing is None:
                logger.info(f"Service: update_patient_name - event {event_id} not found for doctor {doctor_id}")
                raise EventNotFoundError(doctor_id, event_id)

            replacement = existing.model_copy(update={"patient_name": new_patient_name})
            index = doctor.event.index(existing)
            if self.settings.rename_in_place:
                doctor.event[index] = replacement
            else:
                del doctor.event[index]
                doctor.event.append(replacement)

            logger.debug(f"Service: update_patient_name - renamed patient of event {event_id} for doctor {doctor_id}")
            return list(doctor.event)


@lru_cache
def get_schedule_service() -> ScheduleService:
    """Get the schedule service singleton bound to the process-wide store."""
    return ScheduleService(get_registry_store(), get_settings())
