from fastapi import Depends

from gacha.catalog_store import CatalogStore
from gacha.config import Settings, get_settings


def get_store(settings: Settings = Depends(get_settings)) -> CatalogStore:
    return CatalogStore(
        settings.store_path,
        window_capacity=settings.window_capacity,
        pity_denominator=settings.pity_denominator,
    )
