"""Global constants for the clinic registry.

Profile names and the literal strings of the legacy error sentinels. The
sentinel literals are part of the wire contract and must not change.
"""

# Profile names for conditional feature enabling
PROFILE_REST = "rest"
PROFILE_GRAPHQL = "graphql"

# Filler for sentinel fields that carry no error message
NULL_MARKER = "null"

INVALID_ID = "Invalid ID"
EXISTING_EVENT = "Existing event"
APPOINTMENT_FULL = "Appointment full at that time"
NON_EXISTING_EVENT = "Non-existing event"
