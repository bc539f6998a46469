from fastapi import APIRouter, Depends, HTTPException

from gacha.catalog_store import CatalogStore
from gacha.dependencies import get_store
from gacha.errors import EmptyCatalog
from gacha.rng import get_rng
from gacha.schemas import SimulationRequest
from gacha.services.gacha_service import draw_distribution, simulate_draws

router = APIRouter(prefix="/simulate", tags=["Simulation"])


@router.post(
    "",
    summary="Run draw simulation",
    description="Draws against a copy of the stored catalog; nothing is persisted.",
    response_model=dict,
)
def simulate(req: SimulationRequest, store: CatalogStore = Depends(get_store)):
    catalog = store.read()
    if len(catalog) == 0:
        raise HTTPException(409, str(EmptyCatalog()))

    results = simulate_draws(catalog, req.simulations, get_rng(req.seed))
    return draw_distribution(results, req.simulations)
