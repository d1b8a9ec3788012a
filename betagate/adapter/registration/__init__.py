from .client import HttpRegistrationClient, MockRegistrationClient

__all__ = ["HttpRegistrationClient", "MockRegistrationClient"]
