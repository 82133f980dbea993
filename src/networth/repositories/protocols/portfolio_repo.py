"""Portfolio repository protocol."""

from typing import Protocol, Optional

from networth.domain.models import Portfolio


class PortfolioRepository(Protocol):
    """
    Interface for loading portfolio snapshots.

    The valuation engine only reads; `save` exists for seeding and for the
    account management collaborator.
    """

    def get(self, owner: str) -> Optional[Portfolio]:
        """Load the portfolio of an owner, or None if there is none."""
        ...

    def save(self, portfolio: Portfolio) -> Portfolio:
        """Replace the stored portfolio of `portfolio.owner`."""
        ...

    def list_owners(self) -> list[str]:
        """List owners that have a stored portfolio."""
        ...
