"""In-memory registry of doctors and their schedules."""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path

from loguru import logger

from clinic_registry.models.registry_model import DoctorRecord, EventRecord
from clinic_registry.seed import load_seed
from clinic_registry.settings import get_settings


class RegistryStore:
    """Holds the seeded doctors and serializes work on each doctor's schedule.

    Handlers mutate ``doctor.event`` in place while holding ``lock(doctor_id)``.
    The store has no other mutation API.
    """

    def __init__(self, doctors: Iterable[DoctorRecord]):
        self._doctors = list(doctors)
        _validate_doctors(self._doctors)
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def doctors(self) -> list[DoctorRecord]:
        """All doctors in seed order."""
        return self._doctors

    def find_doctor(self, doctor_id: str) -> DoctorRecord | None:
        """Return the doctor with ``doctor_id``, or None."""
        return next((doctor for doctor in self._doctors if doctor.doctor_id == doctor_id), None)

    def event_count(self) -> int:
        """Total number of events across all doctors."""
        return sum(len(doctor.event or []) for doctor in self._doctors)

    @contextmanager
    def lock(self, doctor_id: str) -> Iterator[None]:
        """Hold the lock guarding one doctor's schedule."""
        with self._locks_guard:
            doctor_lock = self._locks.setdefault(doctor_id, threading.Lock())
        with doctor_lock:
            yield


def find_event(doctor: DoctorRecord, event_id: str) -> EventRecord | None:
    """Return the doctor's event with ``event_id``, or None."""
    return next((event for event in doctor.event or [] if event.event_id == event_id), None)


def find_event_at(doctor: DoctorRecord, appointment_time: str) -> EventRecord | None:
    """Return the doctor's event booked at ``appointment_time``, or None."""
    return next((event for event in doctor.event or [] if event.appointment_time == appointment_time), None)


def _validate_doctors(doctors: list[DoctorRecord]) -> None:
    """Check the uniqueness invariants of seed data.

    Raises:
        ValueError: On duplicate doctor ids, or duplicate event ids or
            appointment times within one doctor
    """
    seen_doctors: set[str] = set()
    for doctor in doctors:
        if doctor.doctor_id in seen_doctors:
            raise ValueError(f"Duplicate doctor id in seed: {doctor.doctor_id}")
        seen_doctors.add(doctor.doctor_id)

        if doctor.event is None:
            raise ValueError(f"Doctor {doctor.doctor_id} has no event list")

        event_ids = [event.event_id for event in doctor.event]
        if len(set(event_ids)) != len(event_ids):
            raise ValueError(f"Duplicate event id in seed for doctor {doctor.doctor_id}")

        times = [event.appointment_time for event in doctor.event]
        if len(set(times)) != len(times):
            raise ValueError(f"Double-booked appointment time in seed for doctor {doctor.doctor_id}")


def create_seeded_store(seed_file: str | Path | None = None) -> RegistryStore:
    """Build a store from the built-in seed or a JSON seed file.

    Args:
        seed_file: Optional path to a JSON seed file

    Returns:
        A new, independent RegistryStore
    """
    store = RegistryStore(load_seed(seed_file))
    logger.debug(f"Registry store seeded with {len(store.doctors)} doctor(s) and {store.event_count()} event(s)")
    return store


@lru_cache
def get_registry_store() -> RegistryStore:
    """Get the process-wide registry store, seeded on first use."""
    return create_seeded_store(get_settings().seed_file)
