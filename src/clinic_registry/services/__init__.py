"""Business services of the clinic registry."""
