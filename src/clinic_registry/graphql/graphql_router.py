"""GraphQL router for the clinic registry."""

from fastapi import APIRouter, Request
from strawberry.fastapi import GraphQLRouter

from clinic_registry.graphql.context import GraphQLContext
from clinic_registry.graphql.schema import schema


async def get_context(request: Request) -> GraphQLContext:
    """Build the GraphQL context for a request."""
    return GraphQLContext(request=request)


def create_graphql_router() -> APIRouter:
    """Create the GraphQL router, with the GraphiQL IDE on GET."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql",
        tags=["GraphQL"],
    )
