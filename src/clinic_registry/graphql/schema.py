"""GraphQL schema for the clinic registry.

Resolvers never fail on a rejected operation: scheduling errors are turned
into the legacy sentinel records, which are regular results at the
transport level.
"""

import strawberry
from loguru import logger

from clinic_registry.exceptions import SchedulingError
from clinic_registry.graphql.types import DeleteInput, Doctor, Event
from clinic_registry.models.sentinel import doctor_sentinel, event_sentinel_list
from clinic_registry.services.schedule_service import ScheduleService


@strawberry.type
class Query:
    """Root query type for the GraphQL schema."""

    @strawberry.field
    async def doctor(self, info: strawberry.Info, doctor_id: strawberry.ID) -> Doctor:
        """Get a doctor and their schedule.

        Args:
            info: GraphQL resolver info
            doctor_id: Id of the doctor

        Returns:
            The doctor, or the invalid-id sentinel doctor
        """
        logger.debug(f"GraphQL query: doctor with doctor_id={doctor_id}")

        schedule_service = info.context.service(ScheduleService)
        try:
            return schedule_service.get_doctor(str(doctor_id))
        except SchedulingError as e:
            return doctor_sentinel(e)

    @strawberry.field
    async def event(self, info: strawberry.Info, doctor_id: strawberry.ID) -> list[Event]:
        """List a doctor's events.

        Args:
            info: GraphQL resolver info
            doctor_id: Id of the doctor

        Returns:
            The doctor's events in insertion order, or the invalid-id sentinel list
        """
        logger.debug(f"GraphQL query: event with doctor_id={doctor_id}")

        schedule_service = info.context.service(ScheduleService)
        try:
            return schedule_service.list_events(str(doctor_id))
        except SchedulingError as e:
            return event_sentinel_list(e)


@strawberry.type
class Mutation:
    """Root mutation type for the GraphQL schema."""

    @strawberry.mutation
    async def create_event(
        self,
        info: strawberry.Info,
        doctor_id: strawberry.ID,
        event_id: strawberry.ID,
        patient_name: str,
        appointment_time: str,
    ) -> list[Event]:
        """Book a new appointment.

        Args:
            info: GraphQL resolver info
            doctor_id: Id of the doctor
            event_id: Id of the new event
            patient_name: Name of the patient
            appointment_time: Requested time slot

        Returns:
            The doctor's updated events, or a sentinel list
        """
        logger.debug(f"GraphQL mutation: create_event with doctor_id={doctor_id}, event_id={event_id}")

        schedule_service = info.context.service(ScheduleService)
        try:
            result = schedule_service.create_event(str(doctor_id), str(event_id), patient_name, appointment_time)
        except SchedulingError as e:
            logger.debug(f"GraphQL mutation result: create_event rejected ({e.kind})")
            return event_sentinel_list(e)

        logger.debug(f"GraphQL mutation result: create_event returned {len(result)} event(s)")
        return result

    @strawberry.mutation
    async def delete_event(self, info: strawberry.Info, input: DeleteInput) -> list[Event]:
        """Cancel an appointment.

        Args:
            info: GraphQL resolver info
            input: Doctor and event ids of the appointment

        Returns:
            The doctor's updated events, or a sentinel list
        """
        target = input.to_pydantic()
        logger.debug(f"GraphQL mutation: delete_event with doctor_id={target.doctor_id}, event_id={target.event_id}")

        schedule_service = info.context.service(ScheduleService)
        try:
            result = schedule_service.delete_event(target.doctor_id, target.event_id)
        except SchedulingError as e:
            logger.debug(f"GraphQL mutation result: delete_event rejected ({e.kind})")
            return event_sentinel_list(e)

        logger.debug(f"GraphQL mutation result: delete_event returned {len(result)} event(s)")
        return result

    @strawberry.mutation
    async def update_patient_name(
        self,
        info: strawberry.Info,
        doctor_id: strawberry.ID,
        event_id: strawberry.ID,
        new_patient_name: str,
    ) -> list[Event]:
        """Change the patient of an appointment.

        Args:
            info: GraphQL resolver info
            doctor_id: Id of the doctor
            event_id: Id of the event
            new_patient_name: Name of the new patient

        Returns:
            The doctor's updated events, or a sentinel list
        """
        logger.debug(f"GraphQL mutation: update_patient_name with doctor_id={doctor_id}, event_id={event_id}")

        schedule_service = info.context.service(ScheduleService)
        try:
            result = schedule_service.update_patient_name(str(doctor_id), str(event_id), new_patient_name)
        except SchedulingError as e:
            logger.debug(f"GraphQL mutation result: update_patient_name rejected ({e.kind})")
            return event_sentinel_list(e)

        logger.debug(f"GraphQL mutation result: update_patient_name returned {len(result)} event(s)")
        return result


schema = strawberry.Schema(query=Query, mutation=Mutation)
