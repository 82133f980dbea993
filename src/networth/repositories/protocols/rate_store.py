"""Rate store protocol for durable rate artifacts."""

from typing import Protocol

from networth.domain.models import RatePair


class RateStore(Protocol):
    """Interface for persisting cached rate pairs, one artifact per ordered pair."""

    def load_all(self) -> dict[tuple[str, str], RatePair]:
        """Load every stored pair keyed by (from_code, to_code)."""
        ...

    def save(self, pair: RatePair) -> None:
        """Write a pair, replacing any previous artifact for the same key."""
        ...
