"""Lead capture: the public form PUTs leads, the admin lists and deletes them"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from pagesmith.crud.blobs import BlobStore
from pagesmith.crud.leads import delete_lead, list_leads, save_lead
from pagesmith.server.deps import get_leads_store
from pagesmith.server.errors import error_response, guarded


router = APIRouter(prefix="/.netlify/functions/leads", tags=["leads"])


@router.get("")
@guarded
def read_leads(store: BlobStore = Depends(get_leads_store)):
    return list_leads(store)


@router.put("")
@guarded
def write_lead(body: dict[str, Any] = Body(...), store: BlobStore = Depends(get_leads_store)):
    lead_id = save_lead(store, body)
    return {"message": "Lead saved", "id": lead_id}


@router.delete("")
@guarded
def remove_lead(id: Optional[str] = None, store: BlobStore = Depends(get_leads_store)):
    if not id:
        return error_response(400, "No id provided")
    delete_lead(store, id)
    return {"message": "Lead deleted"}
