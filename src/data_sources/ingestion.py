"""Reading client and executor records from a data directory.

Handles the quirks of the record exports:
- ``demands`` may be null, missing, blank or a ``;``-separated string (CSV)
- Rewards may arrive as strings or comma-formatted numbers (e.g. "1,250")
- Blank rows in a CSV export are dropped
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from src.data_sources.config import (
    CLIENTS_CSV_FILE,
    CLIENTS_FILE,
    CSV_COORDINATE_COLUMNS,
    DEMANDS_SEPARATOR,
    EXECUTOR_FILE,
)
from src.matching.models import Client, Executor

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when client or executor records cannot be read."""


def _parse_numeric(value):
    """Parse a numeric value that may be a string with commas ('1,250' -> 1250.0)."""
    if value is None:
        return float("nan")
    if isinstance(value, (int, float)):
        return value
    s = str(value).replace(",", "").strip().strip('"')
    if s == "":
        return float("nan")
    try:
        return float(s)
    except ValueError:
        return float("nan")


def _parse_demands(value) -> Optional[Tuple[str, ...]]:
    """Normalize a raw demands value; None means "no demand list".

    Examples:
        None        -> None
        NaN         -> None
        ["A", "B"]  -> ("A", "B")
        "A;B"       -> ("A", "B")
        ""          -> None
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return tuple(str(demand) for demand in value)
    if pd.isna(value):
        return None
    s = str(value).strip()
    if not s:
        return None
    return tuple(part.strip() for part in s.split(DEMANDS_SEPARATOR) if part.strip())


class ClientRecordIngester:
    """Reads client and executor records from a directory.

    Clients come from ``clients.json`` (a list of records) or, failing
    that, ``clients.csv``. The executor comes from ``executor.json``.
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _resolve_path(self, filename: str) -> Path:
        """Build the full path for *filename*, raising if missing."""
        filepath = self.data_dir / filename
        if not filepath.exists():
            raise FileNotFoundError(f"Expected file not found: {filepath}")
        return filepath

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------
    def read_clients(self) -> List[Client]:
        """Read all client records.

        Raises:
            FileNotFoundError: If neither clients file exists.
            IngestionError: If the file is malformed.
        """
        if (self.data_dir / CLIENTS_FILE).exists() or not (
            self.data_dir / CLIENTS_CSV_FILE
        ).exists():
            df = self._read_clients_json()
        else:
            df = self._read_clients_csv()

        df = self._clean_client_df(df)

        try:
            clients = [Client.from_raw(record) for record in df.to_dict("records")]
        except (KeyError, TypeError, ValueError) as e:
            raise IngestionError(f"Malformed client record: {e}") from e

        logger.info("Loaded %d clients from %s", len(clients), self.data_dir)
        return clients

    def _read_clients_json(self) -> pd.DataFrame:
        filepath = self._resolve_path(CLIENTS_FILE)
        logger.debug("Reading clients: %s", filepath.name)

        records = self._load_json(filepath)
        if not isinstance(records, list):
            raise IngestionError(
                f"{filepath.name} must contain a list of clients, "
                f"got {type(records).__name__}"
            )
        if not all(isinstance(record, dict) for record in records):
            raise IngestionError(f"{filepath.name} contains a non-object client record")

        return pd.DataFrame.from_records(
            records, columns=self._record_columns(records)
        )

    def _read_clients_csv(self) -> pd.DataFrame:
        filepath = self._resolve_path(CLIENTS_CSV_FILE)
        logger.debug("Reading clients: %s", filepath.name)

        try:
            df = pd.read_csv(
                filepath,
                quotechar='"',
                encoding="utf-8",
                dtype={"name": str, "demands": str},
                skip_blank_lines=True,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise IngestionError(f"Failed to parse {filepath.name}: {e}") from e
        except UnicodeDecodeError as e:
            raise IngestionError(f"{filepath.name} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise IngestionError(f"Cannot read {filepath.name}: {e}") from e

        coord_cols = [col for col in CSV_COORDINATE_COLUMNS if col in df.columns]
        if not coord_cols:
            raise IngestionError(
                f"{filepath.name} has no coordinate columns "
                f"(expected some of {CSV_COORDINATE_COLUMNS})"
            )

        for col in coord_cols:
            df[col] = pd.to_numeric(df[col].apply(_parse_numeric), errors="coerce")

        df["position"] = df[coord_cols].values.tolist()
        return df.drop(columns=coord_cols)

    @staticmethod
    def _record_columns(records: List[Dict]) -> List[str]:
        """Union of record keys, always including the client fields."""
        columns = ["name", "position", "reward", "demands"]
        for record in records:
            for key in record:
                if key not in columns:
                    columns.append(key)
        return columns

    def _clean_client_df(self, df: pd.DataFrame) -> pd.DataFrame:
        """Common cleanup for client DataFrames.

        - Drops rows with no client name
        - Parses rewards as numbers, rejecting non-numeric ones
        - Normalizes demands to a tuple or None
        """
        if df.empty:
            return df

        missing = {"name", "position", "reward"} - set(df.columns)
        if missing:
            raise IngestionError(f"Client records missing fields: {sorted(missing)}")

        df = df.copy()
        df["name"] = df["name"].where(df["name"].notna(), "").astype(str).str.strip()
        blank = df["name"] == ""
        if blank.any():
            logger.warning("Dropping %d client rows with no name", int(blank.sum()))
            df = df[~blank].reset_index(drop=True)

        df["reward"] = pd.to_numeric(df["reward"].apply(_parse_numeric), errors="coerce")
        bad_reward = df["reward"].isna()
        if bad_reward.any():
            raise IngestionError(
                "Non-numeric reward for clients: "
                f"{df.loc[bad_reward, 'name'].tolist()}"
            )

        if "demands" not in df.columns:
            df["demands"] = None
        df["demands"] = df["demands"].apply(_parse_demands).astype(object)

        return df

    # ------------------------------------------------------------------
    # Executor
    # ------------------------------------------------------------------
    def read_executor(self) -> Executor:
        """Read the executor record.

        Raises:
            FileNotFoundError: If the executor file does not exist.
            IngestionError: If the record is malformed.
        """
        filepath = self._resolve_path(EXECUTOR_FILE)
        logger.debug("Reading executor: %s", filepath.name)

        record = self._load_json(filepath)
        if not isinstance(record, dict):
            raise IngestionError(
                f"{filepath.name} must contain an object, got {type(record).__name__}"
            )

        try:
            executor = Executor.from_raw(record)
        except (KeyError, TypeError, ValueError) as e:
            raise IngestionError(f"Malformed executor record: {e}") from e

        logger.info(
            "Loaded executor at %s with %d possibilities",
            executor.position, len(executor.possibilities),
        )
        return executor

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _load_json(filepath: Path):
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise IngestionError(f"Corrupt JSON in {filepath.name}: {e}") from e
        except UnicodeDecodeError as e:
            raise IngestionError(f"{filepath.name} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise IngestionError(f"Cannot read {filepath.name}: {e}") from e
