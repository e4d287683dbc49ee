from __future__ import annotations

from fastapi import Request

from cmon_sd.clients import ControllerClient


def get_controller_client(request: Request) -> ControllerClient:
    """Controller client shared by all requests, created in the app lifespan."""
    return request.app.state.cmon_client
