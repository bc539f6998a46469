import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path

from pydantic import ValidationError

from gacha.draw_engine import DEFAULT_PITY_DENOMINATOR, Catalog
from gacha.errors import ParseError
from gacha.history import DEFAULT_WINDOW_CAPACITY, HistoryWindow
from gacha.models.gacha_models import CatalogSnapshot, HistorySnapshot

logger = logging.getLogger(__name__)

# Handlers run in a threadpool; read-modify-write cycles must not interleave.
_write_lock = threading.RLock()


def dump_snapshot(catalog: Catalog) -> CatalogSnapshot:
    return CatalogSnapshot(
        entries=catalog.entries,
        history=HistorySnapshot(
            window=catalog.history.export(),
            capacity=catalog.history.capacity,
        ),
        pity_denominator=catalog.pity_denominator,
    )


def restore(snapshot: CatalogSnapshot) -> Catalog:
    history = HistoryWindow(
        capacity=snapshot.history.capacity,
        records=snapshot.history.window,
    )
    return Catalog(
        entries=snapshot.entries,
        history=history,
        pity_denominator=snapshot.pity_denominator,
    )


def save(catalog: Catalog) -> bytes:
    return dump_snapshot(catalog).model_dump_json(indent=2).encode("utf-8")


def load(data: bytes) -> Catalog:
    """Decode a snapshot. Malformed input raises ParseError, never an empty catalog."""
    try:
        snapshot = CatalogSnapshot.model_validate_json(data)
    except ValidationError as exc:
        raise ParseError(f"Invalid catalog snapshot: {exc}") from exc
    return restore(snapshot)


class CatalogStore:
    """File-backed snapshot store. One read and one write per operation."""

    def __init__(
        self,
        path,
        window_capacity: int = DEFAULT_WINDOW_CAPACITY,
        pity_denominator: int = DEFAULT_PITY_DENOMINATOR,
    ):
        self.path = Path(path)
        self.window_capacity = window_capacity
        self.pity_denominator = pity_denominator

    def new_catalog(self) -> Catalog:
        return Catalog(
            window_capacity=self.window_capacity,
            pity_denominator=self.pity_denominator,
        )

    def read(self) -> Catalog:
        if not self.path.exists():
            logger.info("No snapshot at %s, starting with an empty catalog", self.path)
            return self.new_catalog()

        try:
            return load(self.path.read_bytes())
        except ParseError:
            logger.error("Snapshot at %s could not be parsed", self.path)
            raise

    def write(self, catalog: Catalog) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(save(catalog))
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved %d entries to %s", len(catalog), self.path)

    @contextmanager
    def operation(self):
        """
        Hold the store lock across one read-modify-write cycle.

        The catalog is written back only when the block exits normally, so an
        EmptyCatalog or NotFound raised inside it leaves the snapshot as it was.
        """
        with _write_lock:
            catalog = self.read()
            yield catalog
            self.write(catalog)
