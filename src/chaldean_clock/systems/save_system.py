"""Higher-level SaveSystem that stores Session snapshots in numbered slots."""
from __future__ import annotations

from pathlib import Path
import logging

from src.chaldean_clock.systems import save as save_helpers

_logger = logging.getLogger("chaldean_clock.save_system")


class SaveSystem:
    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    @staticmethod
    def slot_name(slot: int) -> str:
        return f"clock_slot_{slot}"

    def save(self, slot: int, session) -> Path:
        _logger.info("Saving clock to slot %s", slot)
        path = save_helpers.save_snapshot(self.data_dir, self.slot_name(slot), session.snapshot())
        _logger.info("Saved to %s", path)
        return path

    def load(self, slot: int, session) -> bool:
        """Restore `session` from `slot`. Returns False if nothing usable was found."""
        _logger.info("Loading clock from slot %s", slot)
        try:
            payload = save_helpers.load_snapshot(self.data_dir, self.slot_name(slot))
        except save_helpers.LoadError as e:
            _logger.warning("Could not load slot %s: %s", slot, e)
            return False
        session.restore(payload)
        return True

