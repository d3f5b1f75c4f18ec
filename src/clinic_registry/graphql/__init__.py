"""GraphQL surface of the clinic registry."""
