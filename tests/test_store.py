"""Tests for the registry store and its seed."""

import json
import threading

import pytest
from pydantic import ValidationError

from clinic_registry.models.registry_model import DoctorRecord, EventRecord
from clinic_registry.seed import SEED_DOCTORS, load_seed
from clinic_registry.store import RegistryStore, create_seeded_store, find_event, find_event_at


def _doctor(doctor_id: str, *events: tuple[str, str, str]) -> DoctorRecord:
    return DoctorRecord(
        doctor_id=doctor_id,
        doctor_name="Name",
        clinic_name="Clinic",
        specialty="Specialty",
        event=[EventRecord(event_id=e, patient_name=p, appointment_time=t) for e, p, t in events],
    )


class TestSeed:
    """The built-in seed is part of the interoperability contract."""

    def test_builtin_seed(self, store: RegistryStore):
        assert len(store.doctors) == 1
        doctor = store.doctors[0]
        assert doctor.model_dump() == {
            "doctor_id": "1",
            "doctor_name": "Angela",
            "clinic_name": "CMU-clinic",
            "specialty": "vaccine-department",
            "event": [
                {"event_id": "1", "patient_name": "Alex", "appointment_time": "9:30"},
                {"event_id": "2", "patient_name": "Chang", "appointment_time": "15:30"},
            ],
        }

    def test_stores_are_independent(self):
        first = create_seeded_store()
        second = create_seeded_store()
        first.doctors[0].event.clear()
        assert len(second.doctors[0].event) == 2
        assert len(SEED_DOCTORS[0]["event"]) == 2

    def test_seed_file(self, tmp_path):
        seed_file = tmp_path / "seed.json"
        seed_file.write_text(
            json.dumps(
                [
                    {
                        "doctor_id": "7",
                        "doctor_name": "Maria",
                        "clinic_name": "North",
                        "specialty": "cardiology",
                        "event": [{"event_id": "a", "patient_name": "Kim", "appointment_time": "8:00"}],
                    }
                ]
            )
        )
        store = create_seeded_store(seed_file)
        assert [d.doctor_id for d in store.doctors] == ["7"]
        assert store.event_count() == 1

    def test_seed_file_with_wrong_shape(self, tmp_path):
        seed_file = tmp_path / "seed.json"
        seed_file.write_text(json.dumps([{"doctor_id": "7"}]))
        with pytest.raises(ValidationError):
            load_seed(seed_file)

    def test_missing_seed_file(self, tmp_path):
        with pytest.raises(OSError):
            load_seed(tmp_path / "missing.json")


class TestValidation:
    """Seed data breaking the uniqueness invariants is rejected."""

    def test_duplicate_doctor_id(self):
        with pytest.raises(ValueError, match="Duplicate doctor id"):
            RegistryStore([_doctor("1"), _doctor("1")])

    def test_duplicate_event_id(self):
        with pytest.raises(ValueError, match="Duplicate event id"):
            RegistryStore([_doctor("1", ("1", "Alex", "9:30"), ("1", "Chang", "15:30"))])

    def test_double_booked_time(self):
        with pytest.raises(ValueError, match="Double-booked"):
            RegistryStore([_doctor("1", ("1", "Alex", "9:30"), ("2", "Chang", "9:30"))])

    def test_same_ids_across_doctors_allowed(self):
        store = RegistryStore([_doctor("1", ("1", "Alex", "9:30")), _doctor("2", ("1", "Alex", "9:30"))])
        assert store.event_count() == 2


class TestLookup:
    def test_find_doctor(self, store: RegistryStore):
        assert store.find_doctor("1").doctor_name == "Angela"
        assert store.find_doctor("2") is None

    def test_find_event(self, store: RegistryStore):
        doctor = store.find_doctor("1")
        assert find_event(doctor, "2").patient_name == "Chang"
        assert find_event(doctor, "3") is None

    def test_find_event_at(self, store: RegistryStore):
        doctor = store.find_doctor("1")
        assert find_event_at(doctor, "9:30").event_id == "1"
        assert find_event_at(doctor, "9:31") is None


def test_lock_is_per_doctor(store: RegistryStore):
    """Holding one doctor's lock does not block another doctor."""
    acquired = threading.Event()

    def other_doctor():
        with store.lock("2"):
            acquired.set()

    with store.lock("1"):
        worker = threading.Thread(target=other_doctor)
        worker.start()
        assert acquired.wait(timeout=5)
        worker.join()
