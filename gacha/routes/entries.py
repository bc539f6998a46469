import logging

from fastapi import APIRouter, Depends, HTTPException

from gacha.catalog_store import CatalogStore
from gacha.dependencies import get_store
from gacha.errors import InvalidEntry, NotFound
from gacha.models.gacha_models import Entry, Tier
from gacha.schemas import EntryCreate, EntrySpecRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/entries", tags=["Entries"])


@router.get("", response_model=dict)
def list_entries(store: CatalogStore = Depends(get_store)):
    catalog = store.read()
    grouped = catalog.list_by_tier()
    return {
        Tier.common.value: [e.model_dump(mode="json") for e in grouped[Tier.common]],
        Tier.rare.value: [e.model_dump(mode="json") for e in grouped[Tier.rare]],
        "count": len(catalog),
    }


def _insert(store: CatalogStore, entry: Entry) -> Entry:
    try:
        with store.operation() as catalog:
            catalog.insert(entry)
    except InvalidEntry as exc:
        raise HTTPException(400, str(exc))
    logger.info("Added %s entry %r (weight %s)", entry.tier.value, entry.name, entry.weight)
    return entry


@router.post("", status_code=201, response_model=Entry)
def add_entry(req: EntryCreate, store: CatalogStore = Depends(get_store)):
    return _insert(store, Entry(name=req.name, tier=req.tier, weight=req.weight))


@router.post(
    "/parse",
    status_code=201,
    response_model=Entry,
    summary="Add an entry from name:tier:weight",
)
def add_entry_from_spec(req: EntrySpecRequest, store: CatalogStore = Depends(get_store)):
    try:
        entry = Entry.parse(req.spec)
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError too
        raise HTTPException(400, str(exc))
    return _insert(store, entry)


@router.delete("/{name:path}", response_model=Entry)
def remove_entry(name: str, store: CatalogStore = Depends(get_store)):
    try:
        with store.operation() as catalog:
            removed = catalog.remove(name)
    except NotFound:
        logger.warning("Remove requested for missing entry %r", name)
        raise HTTPException(404, f'"{name}" not in list')
    logger.info("Removed %r", name)
    return removed
