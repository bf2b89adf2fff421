"""BandwagonHost API — VPS service info and bandwidth usage."""

from fastapi import APIRouter, Depends

from backend.services.bandwagon import BandwagonClient, get_bandwagon_client
from backend.api.deps import require_superuser

router = APIRouter(prefix="/api/bandwagon", tags=["bandwagon"], dependencies=[Depends(require_superuser)])


@router.get("/service-info")
def service_info(client: BandwagonClient = Depends(get_bandwagon_client)):
    return client.get_service_info()


@router.get("/usage-stats")
def usage_stats(client: BandwagonClient = Depends(get_bandwagon_client)):
    return client.get_usage_stats()
