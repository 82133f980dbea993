"""Symbol value object: a currency code or an instrument ticker."""

from dataclasses import dataclass

from networth.core.exceptions import ValidationError
from networth.domain.models.enums import SymbolKind


@dataclass(frozen=True)
class Symbol:
    """
    Identifies what a ledger is denominated in.

    Currencies are three-letter ISO codes; instruments are exchange tickers.
    Codes are stored upper-case so "chf" and "CHF" compare equal.
    """

    kind: SymbolKind
    code: str

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            object.__setattr__(self, "kind", SymbolKind(self.kind))
        code = (self.code or "").strip().upper()
        if not code:
            raise ValidationError("Symbol code must not be empty")
        if self.kind == SymbolKind.CURRENCY and (len(code) != 3 or not code.isalpha()):
            raise ValidationError(f"Currency must be a 3-letter ISO 4217 code: {self.code!r}")
        object.__setattr__(self, "code", code)

    @classmethod
    def currency(cls, code: str) -> "Symbol":
        return cls(SymbolKind.CURRENCY, code)

    @classmethod
    def instrument(cls, ticker: str) -> "Symbol":
        return cls(SymbolKind.INSTRUMENT, ticker)

    @property
    def is_instrument(self) -> bool:
        return self.kind == SymbolKind.INSTRUMENT

    def __str__(self) -> str:
        return self.code
