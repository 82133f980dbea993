"""Parquet file storage for cached rate pairs."""

from networth.repositories.parquet.rate_store import (
    ParquetRateStore,
    pair_file_name,
    parse_pair_file_name,
)

__all__ = ["ParquetRateStore", "pair_file_name", "parse_pair_file_name"]
