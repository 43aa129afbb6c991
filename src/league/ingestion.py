"""Bulk player ingestion from ``Name,Role,ProTeam,Region`` text.

One player per line, e.g.::

    Faker,MID,T1,LCK
    Ruler, ADC, Gen.G, LCK

Handles the quirks of hand-typed lists:
- Whitespace around commas
- Lower-case roles and regions
- Blank lines and extra trailing fields
- Lines with a missing name or an unknown role/region (skipped)
"""

import io
import logging
import warnings
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from src.league.config import REGIONS, ROLES

logger = logging.getLogger(__name__)

PLAYER_COLUMNS = ["name", "role", "pro_team", "region"]


def _empty_frame() -> pd.DataFrame:
    return pd.DataFrame(columns=PLAYER_COLUMNS)


def parse_player_lines(text: str) -> pd.DataFrame:
    """Parse bulk player text into a DataFrame.

    Returns DataFrame with columns:
        name, role, pro_team, region
    Role and region are upper-cased; pro_team is "" when absent. Invalid
    lines are dropped.
    """
    if not text or not text.strip():
        return _empty_frame()

    # index_col=False keeps the first field as the name on every line, so
    # extra trailing fields are cut off instead of shifting the columns
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=PLAYER_COLUMNS,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            skip_blank_lines=True,
            engine="python",
        )

    df = df.fillna("")
    for col in PLAYER_COLUMNS:
        df[col] = df[col].astype(str).str.strip()
    df["role"] = df["role"].str.upper()
    df["region"] = df["region"].str.upper()

    valid = (df["name"] != "") & df["role"].isin(ROLES) & df["region"].isin(REGIONS)
    if not valid.all():
        logger.warning(
            "Skipping %d invalid player lines: %s",
            (~valid).sum(),
            df.loc[~valid, "name"].tolist(),
        )
        df = df[valid]

    df = df.reset_index(drop=True)
    logger.info("Parsed %d players", len(df))
    return df


def read_player_file(path: Path) -> pd.DataFrame:
    """Read a bulk player file from disk."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Player file not found: {path}")
    logger.info("Reading players: %s", path.name)
    return parse_player_lines(path.read_text(encoding="utf-8"))


def players_from_frame(
    df: pd.DataFrame,
) -> List[Tuple[str, str, str, Optional[str]]]:
    """Rows as ``(name, role, region, pro_team)`` tuples for add_players."""
    return [
        (row.name, row.role, row.region, row.pro_team or None)
        for row in df.itertuples(index=False)
    ]
