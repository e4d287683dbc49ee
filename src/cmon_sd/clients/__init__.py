from cmon_sd.clients.cmon import CmonClient, ControllerClient
from cmon_sd.clients.errors import AuthenticationError, CmonError, CmonRequestError, FetchError

__all__ = [
    "AuthenticationError",
    "CmonClient",
    "CmonError",
    "CmonRequestError",
    "ControllerClient",
    "FetchError",
]
