"""Errors raised while talking to the cmon controller."""


class CmonError(Exception):
    """Base class for controller client errors."""


class CmonRequestError(CmonError):
    """The controller could not be reached or answered with an HTTP error."""


class AuthenticationError(CmonError):
    """The controller rejected the credentials or was unreachable during login."""


class FetchError(CmonError):
    """Authenticated, but the topology could not be retrieved."""
