"""Form leads stored as JSON blobs keyed by lead id"""

from typing import Any, Optional

from pagesmith.auth.tokens import now_ms
from pagesmith.crud.blobs import BlobStore


def list_leads(store: BlobStore) -> list[dict[str, Any]]:
    """Return every lead as {id, **fields}. The stored key is the id and comes first."""
    leads = []
    for entry in store.list():
        data = store.get_json(entry.key)
        if data is None:
            continue
        fields = data if isinstance(data, dict) else {"value": data}
        leads.append({"id": entry.key, **{k: v for k, v in fields.items() if k != "id"}})
    return leads


def save_lead(store: BlobStore, body: dict[str, Any], now: Optional[int] = None) -> str:
    """Store body under its `id`, or under `lead-{millis}` when it has none. Returns the id."""
    lead_id = str(body.get("id") or f"lead-{now_ms() if now is None else now}")
    store.set_json(lead_id, body)
    return lead_id


def delete_lead(store: BlobStore, lead_id: str) -> None:
    store.delete(lead_id)


def lead_columns(leads: list[dict[str, Any]]) -> list[str]:
    """Union of field names across leads in first-seen order, with `id` first."""
    columns = dict.fromkeys(["id"])
    for lead in leads:
        columns.update(dict.fromkeys(lead))
    return list(columns) if leads else []
