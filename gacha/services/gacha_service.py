from collections import Counter
from typing import Dict

from gacha.catalog_store import dump_snapshot, restore
from gacha.draw_engine import Catalog
from gacha.models.gacha_models import Tier
from gacha.rng import RandomSource


def simulate_draws(catalog: Catalog, simulations: int, rng: RandomSource) -> Dict[str, Counter]:
    """Run draws on a copy of the catalog; the caller's history is left untouched."""
    sandbox = restore(dump_snapshot(catalog))
    by_name = Counter()
    by_tier = Counter()
    for _ in range(simulations):
        entry = sandbox.draw(rng)
        by_name[entry.name] += 1
        by_tier[entry.tier.value] += 1
    return {"entries": by_name, "tiers": by_tier}


def draw_distribution(results: Dict[str, Counter], simulations: int, top: int = 10) -> dict:
    """Percentages per tier and per entry name, rounded to two decimals."""
    tier_distribution = {
        tier.value: round((results["tiers"].get(tier.value, 0) / simulations) * 100, 2)
        for tier in Tier
    }
    entry_distribution = {
        name: round((count / simulations) * 100, 2)
        for name, count in results["entries"].most_common()
    }
    return {
        "simulations": simulations,
        "tier_distribution": tier_distribution,
        "entry_distribution": entry_distribution,
        "top_entries": results["entries"].most_common(top),
    }
