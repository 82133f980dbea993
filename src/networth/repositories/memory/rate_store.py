"""In-memory RateStore."""

from networth.domain.models import RatePair


class InMemoryRateStore:
    """Keeps saved pairs in a dict; `saves` counts writes per pair key."""

    def __init__(self, pairs: dict[tuple[str, str], RatePair] | None = None):
        self._pairs: dict[tuple[str, str], RatePair] = {}
        self.saves: dict[str, int] = {}
        for pair in (pairs or {}).values():
            self._pairs[(pair.from_code, pair.to_code)] = pair.snapshot()

    def load_all(self) -> dict[tuple[str, str], RatePair]:
        return {key: pair.snapshot() for key, pair in self._pairs.items()}

    def save(self, pair: RatePair) -> None:
        stored = pair.snapshot()
        stored.dirty = False
        self._pairs[(pair.from_code, pair.to_code)] = stored
        self.saves[pair.key] = self.saves.get(pair.key, 0) + 1
