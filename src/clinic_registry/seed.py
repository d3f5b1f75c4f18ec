"""Seed data for the registry store.

The built-in seed reproduces the dataset clients test against. A JSON file
with the same shape (a list of doctors, each with an ``event`` list) can be
used instead through the ``seed_file`` setting.
"""

from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import TypeAdapter

from clinic_registry.models.registry_model import DoctorRecord

SEED_DOCTORS: list[dict[str, Any]] = [
    {
        "doctor_id": "1",
        "doctor_name": "Angela",
        "clinic_name": "CMU-clinic",
        "specialty": "vaccine-department",
        "event": [
            {"event_id": "1", "patient_name": "Alex", "appointment_time": "9:30"},
            {"event_id": "2", "patient_name": "Chang", "appointment_time": "15:30"},
        ],
    },
]

_doctor_list_adapter = TypeAdapter(list[DoctorRecord])


def load_seed(seed_file: str | Path | None = None) -> list[DoctorRecord]:
    """Load the doctors to seed the store with.

    Args:
        seed_file: Path to a JSON seed file, or None for the built-in seed

    Returns:
        Freshly built doctor records; callers may mutate them freely

    Raises:
        OSError: If the seed file cannot be read
        pydantic.ValidationError: If the seed file does not match the doctor shape
    """
    if seed_file is None:
        return _doctor_list_adapter.validate_python(SEED_DOCTORS)

    path = Path(seed_file)
    logger.info(f"Loading registry seed from {path}")
    return _doctor_list_adapter.validate_json(path.read_text(encoding="utf-8"))
