"""Allow ``python -m clinic_registry``."""

from clinic_registry.main import app

app()
