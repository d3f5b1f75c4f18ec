"""End-to-end tests of the GraphQL schema over HTTP."""

from clinic_registry.graphql.schema import schema

EVENT_FIELDS = "eventId patientName appointmentTime"

DOCTOR_QUERY = f"""
query Doctor($doctorId: ID!) {{
  doctor(doctorId: $doctorId) {{ doctorId doctorName clinicName specialty event {{ {EVENT_FIELDS} }} }}
}}
"""

EVENT_QUERY = f"""
query Events($doctorId: ID!) {{
  event(doctorId: $doctorId) {{ {EVENT_FIELDS} }}
}}
"""

CREATE_EVENT = f"""
mutation Create($doctorId: ID!, $eventId: ID!, $patientName: String!, $appointmentTime: String!) {{
  createEvent(doctorId: $doctorId, eventId: $eventId, patientName: $patientName, appointmentTime: $appointmentTime) {{ {EVENT_FIELDS} }}
}}
"""

DELETE_EVENT = f"""
mutation Delete($input: deleteInput!) {{
  deleteEvent(input: $input) {{ {EVENT_FIELDS} }}
}}
"""

UPDATE_PATIENT_NAME = f"""
mutation Rename($doctorId: ID!, $eventId: ID!, $newPatientName: String!) {{
  updatePatientName(doctorId: $doctorId, eventId: $eventId, newPatientName: $newPatientName) {{ {EVENT_FIELDS} }}
}}
"""

ALEX = {"eventId": "1", "patientName": "Alex", "appointmentTime": "9:30"}
CHANG = {"eventId": "2", "patientName": "Chang", "appointmentTime": "15:30"}


def _execute(client, query: str, **variables) -> dict:
    response = client.post("/graphql", json={"query": query, "variables": variables})
    assert response.status_code == 200
    body = response.json()
    assert body.get("errors") is None
    return body["data"]


def _sentinel(event_id="null", patient_name="null", appointment_time="null") -> list[dict]:
    return [{"eventId": event_id, "patientName": patient_name, "appointmentTime": appointment_time}]


class TestSchemaShape:
    """The schema keeps the names and shapes of the legacy API."""

    def test_type_and_input_names(self):
        sdl = str(schema)
        assert "type Doctor" in sdl
        assert "type Event" in sdl
        assert "input deleteInput" in sdl
        assert "deleteEvent(input: deleteInput!)" in sdl
        assert "doctorId: ID!" in sdl
        assert "eventId: ID!" in sdl


class TestQueries:
    def test_doctor(self, client):
        data = _execute(client, DOCTOR_QUERY, doctorId="1")
        assert data["doctor"] == {
            "doctorId": "1",
            "doctorName": "Angela",
            "clinicName": "CMU-clinic",
            "specialty": "vaccine-department",
            "event": [ALEX, CHANG],
        }

    def test_unknown_doctor_returns_sentinel(self, client):
        data = _execute(client, DOCTOR_QUERY, doctorId="42")
        assert data["doctor"] == {
            "doctorId": "Invalid ID",
            "doctorName": "null",
            "clinicName": "null",
            "specialty": "null",
            "event": None,
        }

    def test_event(self, client):
        assert _execute(client, EVENT_QUERY, doctorId="1")["event"] == [ALEX, CHANG]

    def test_event_unknown_doctor(self, client):
        assert _execute(client, EVENT_QUERY, doctorId="42")["event"] == _sentinel(event_id="Invalid ID")


class TestMutations:
    def test_create_event(self, client):
        data = _execute(client, CREATE_EVENT, doctorId="1", eventId="3", patientName="Sam", appointmentTime="11:00")
        assert data["createEvent"] == [ALEX, CHANG, {"eventId": "3", "patientName": "Sam", "appointmentTime": "11:00"}]

    def test_create_existing_event(self, client):
        data = _execute(client, CREATE_EVENT, doctorId="1", eventId="2", patientName="Sam", appointmentTime="11:00")
        assert data["createEvent"] == _sentinel(event_id="Existing event")
        assert _execute(client, EVENT_QUERY, doctorId="1")["event"] == [ALEX, CHANG]

    def test_create_in_full_time_slot(self, client):
        data = _execute(client, CREATE_EVENT, doctorId="1", eventId="3", patientName="Sam", appointmentTime="9:30")
        assert data["createEvent"] == _sentinel(appointment_time="Appointment full at that time")
        assert _execute(client, EVENT_QUERY, doctorId="1")["event"] == [ALEX, CHANG]

    def test_create_unknown_doctor(self, client):
        data = _execute(client, CREATE_EVENT, doctorId="2", eventId="3", patientName="Sam", appointmentTime="11:00")
        assert data["createEvent"] == _sentinel(event_id="Invalid ID")

    def test_delete_event(self, client):
        data = _execute(client, DELETE_EVENT, input={"doctorId": "1", "eventId": "1"})
        assert data["deleteEvent"] == [CHANG]

    def test_delete_missing_event(self, client):
        data = _execute(client, DELETE_EVENT, input={"doctorId": "1", "eventId": "9"})
        assert data["deleteEvent"] == _sentinel(event_id="Non-existing event")
        assert _execute(client, EVENT_QUERY, doctorId="1")["event"] == [ALEX, CHANG]

    def test_delete_unknown_doctor(self, client):
        data = _execute(client, DELETE_EVENT, input={"doctorId": "9", "eventId": "1"})
        assert data["deleteEvent"] == _sentinel(event_id="Invalid ID")

    def test_update_patient_name(self, client):
        data = _execute(client, UPDATE_PATIENT_NAME, doctorId="1", eventId="2", newPatientName="Lee")
        assert data["updatePatientName"] == [ALEX, {"eventId": "2", "patientName": "Lee", "appointmentTime": "15:30"}]

    def test_update_patient_name_reorders(self, client):
        data = _execute(client, UPDATE_PATIENT_NAME, doctorId="1", eventId="1", newPatientName="Lee")
        assert data["updatePatientName"] == [CHANG, {"eventId": "1", "patientName": "Lee", "appointmentTime": "9:30"}]

    def test_update_missing_event(self, client):
        data = _execute(client, UPDATE_PATIENT_NAME, doctorId="1", eventId="5", newPatientName="Lee")
        assert data["updatePatientName"] == _sentinel(event_id="Non-existing event")

    def test_update_unknown_doctor(self, client):
        data = _execute(client, UPDATE_PATIENT_NAME, doctorId="5", eventId="1", newPatientName="Lee")
        assert data["updatePatientName"] == _sentinel(event_id="Invalid ID")

    def test_doctor_reflects_mutations(self, client):
        _execute(client, CREATE_EVENT, doctorId="1", eventId="3", patientName="Sam", appointmentTime="11:00")
        _execute(client, DELETE_EVENT, input={"doctorId": "1", "eventId": "1"})
        data = _execute(client, DOCTOR_QUERY, doctorId="1")
        assert [e["eventId"] for e in data["doctor"]["event"]] == ["2", "3"]
