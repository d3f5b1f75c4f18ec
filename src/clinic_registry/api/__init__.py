"""REST API of the clinic registry."""
