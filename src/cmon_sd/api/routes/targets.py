from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from cmon_sd.api.deps import get_controller_client
from cmon_sd.clients import AuthenticationError, ControllerClient, FetchError
from cmon_sd.topology import map_topology

router = APIRouter()
logger = structlog.get_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/")
async def list_targets(
    client: ControllerClient = Depends(get_controller_client),  # noqa: B008
) -> JSONResponse:
    """Scrape targets for every cluster, in Prometheus http_sd format."""
    try:
        await client.authenticate()
    except AuthenticationError as exc:
        logger.error("Error authenticating", error=str(exc))
        return error_response(status.HTTP_401_UNAUTHORIZED, f"Error authenticating: {exc}")

    try:
        clusters = await client.get_all_cluster_info(with_hosts=True)
    except FetchError as exc:
        logger.error("Error getting cluster info", error=str(exc))
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, f"Error getting cluster info: {exc}"
        )

    groups = map_topology(clusters, client.controller_id())
    logger.debug("targets_generated", clusters=len(clusters))
    return JSONResponse(status_code=status.HTTP_200_OK, content=[g.to_dict() for g in groups])
