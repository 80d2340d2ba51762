"""Client endpoints"""

from typing import Any, List, Optional
from fastapi import APIRouter, Depends

from app.api import deps
from app.models.enums import ClientStatus
from app.schemas.client import ClientCreate, ClientRecord, ClientUpdate
from app.schemas.responses import SuccessResponse
from app.services.client_service import ClientService
from app.store.base import RecordStore

router = APIRouter()


@router.get("", response_model=SuccessResponse[List[ClientRecord]])
async def list_clients(
    status: Optional[ClientStatus] = None,
    search: Optional[str] = None,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """List clients, optionally filtered by status or a name/email search."""
    return deps.respond(await ClientService.list_clients(store, status=status, search=search))


@router.post("", response_model=SuccessResponse[ClientRecord])
async def create_client(
    client_in: ClientCreate,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """Create a client. New clients are active with zero totals."""
    result = await ClientService.create_client(store, client_in)
    return deps.respond(result, "Client created successfully")


@router.get("/{client_id}", response_model=SuccessResponse[ClientRecord])
async def get_client(
    client_id: int,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    return deps.respond(await ClientService.get_client(store, client_id))


@router.patch("/{client_id}", response_model=SuccessResponse[ClientRecord])
async def update_client(
    client_id: int,
    client_in: ClientUpdate,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    result = await ClientService.update_client(store, client_id, client_in)
    return deps.respond(result, "Client updated successfully")


@router.delete("/{client_id}", response_model=SuccessResponse[ClientRecord])
async def delete_client(
    client_id: int,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """Delete a client. Fees billed to the client are kept."""
    result = await ClientService.delete_client(store, client_id)
    return deps.respond(result, "Client deleted successfully")


@router.post("/{client_id}/reconcile", response_model=SuccessResponse[ClientRecord])
async def reconcile_client(
    client_id: int,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """Recompute the client's totals from its fees (repairs stale totals)."""
    result = await ClientService.reconcile_client(store, client_id)
    return deps.respond(result, "Client totals recomputed")
