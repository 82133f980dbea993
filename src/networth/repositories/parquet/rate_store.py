"""Parquet-backed RateStore: one `FROM:TO.parquet` file per ordered pair."""

import logging
import os
from datetime import datetime
from pathlib import Path

import pandas as pd
import pyarrow as pa

from networth.core.exceptions import PersistenceError
from networth.core.timezone import local_tz
from networth.domain.models import RatePair

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ":"
SUFFIX = ".parquet"


def pair_file_name(from_code: str, to_code: str) -> str:
    return f"{from_code}{KEY_SEPARATOR}{to_code}{SUFFIX}"


def parse_pair_file_name(path: Path) -> tuple[str, str] | None:
    """Recover (from_code, to_code) from an artifact path; None if it is not one."""
    if path.suffix != SUFFIX:
        return None
    from_code, sep, to_code = path.stem.partition(KEY_SEPARATOR)
    if not sep or not from_code or not to_code:
        return None
    return from_code, to_code


class ParquetRateStore:
    """
    Stores each rate pair as a two-column table (Date, Close).

    Files are written to a temporary name and renamed into place so a crash
    never leaves a truncated artifact behind.
    """

    def __init__(self, directory: Path):
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def load_all(self) -> dict[tuple[str, str], RatePair]:
        """Scan the directory and load every pair artifact."""
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            paths = sorted(self._directory.iterdir())
        except OSError as exc:
            raise PersistenceError(f"Cannot read rate cache directory {self._directory}: {exc}") from exc

        pairs: dict[tuple[str, str], RatePair] = {}
        for path in paths:
            key = parse_pair_file_name(path)
            if key is None:
                logger.warning("Skipping unrecognised file in rate cache: %s", path.name)
                continue
            pairs[key] = self._read(path, *key)
        logger.info("Loaded %d cached rate pairs from %s", len(pairs), self._directory)
        return pairs

    def save(self, pair: RatePair) -> None:
        """Write a pair atomically."""
        path = self._directory / pair_file_name(pair.from_code, pair.to_code)
        tmp_path = path.with_name(path.name + ".tmp")
        dates = sorted(pair.rates)
        frame = pd.DataFrame(
            {
                "Date": pd.Series(dates, dtype="object"),
                "Close": pd.Series([pair.rates[d] for d in dates], dtype="float64"),
            }
        )
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            frame.to_parquet(tmp_path, index=False, engine="pyarrow")
            os.replace(tmp_path, path)
        except (OSError, ValueError, pa.ArrowException) as exc:
            raise PersistenceError(f"Cannot write rate pair {pair.key} to {path}: {exc}") from exc

    @staticmethod
    def _read(path: Path, from_code: str, to_code: str) -> RatePair:
        try:
            frame = pd.read_parquet(path, engine="pyarrow")
            fetched_on = datetime.fromtimestamp(path.stat().st_mtime, local_tz()).date()
        except (OSError, ValueError, pa.ArrowException) as exc:
            raise PersistenceError(f"Cannot read rate pair file {path}: {exc}") from exc
        if "Date" not in frame.columns or "Close" not in frame.columns:
            raise PersistenceError(f"Rate pair file {path} lacks Date/Close columns")

        dates = pd.to_datetime(frame["Date"]).dt.date
        rates = {d: float(v) for d, v in zip(dates, frame["Close"].to_numpy()) if pd.notna(v)}
        return RatePair(
            from_code=from_code,
            to_code=to_code,
            rates=rates,
            dirty=False,
            fetched_on=fetched_on,
        )
