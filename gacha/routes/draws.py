from fastapi import APIRouter, Depends, HTTPException

from gacha.catalog_store import CatalogStore
from gacha.dependencies import get_store
from gacha.errors import EmptyCatalog
from gacha.rng import get_rng
from gacha.schemas import DrawRequest

router = APIRouter(tags=["Draws"])


@router.post(
    "/draw",
    summary="Draw one entry",
    description="Rare is guaranteed once no rare has been drawn within the history window.",
    response_model=dict,
)
def draw(req: DrawRequest, store: CatalogStore = Depends(get_store)):
    try:
        with store.operation() as catalog:
            entry = catalog.draw(get_rng(req.seed))
    except EmptyCatalog as exc:
        raise HTTPException(409, str(exc))
    return {"tier": entry.tier.value, "drop": entry.model_dump(mode="json")}


@router.get("/history", response_model=dict)
def history(store: CatalogStore = Depends(get_store)):
    window = store.read().history
    return {
        "capacity": window.capacity,
        "count": len(window),
        "records": [r.model_dump(mode="json") for r in window.export()],
        "lines": window.format_records(),
    }
