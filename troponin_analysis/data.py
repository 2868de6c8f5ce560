"""
Load and prepare the troponin dataset
-------------------------------------
Reads troponin.csv, types every column against a fixed schema, relabels the
coded categories and adds the two derived columns used by the charts.
"""

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class CategoricalColumn:
    """A categorical column: allowed raw codes plus the labels they display as."""
    name: str
    codes: tuple
    labels: dict = field(default_factory=dict)
    ordered: bool = False


AGE = CategoricalColumn(
    "Age",
    codes=("40-49", "50-59", "60-69", "70-79", "80-89", "90-"),
    labels={"90-": "90+"},
    ordered=True,
)
SEX = CategoricalColumn("Sex", codes=("1", "2"), labels={"1": "Male", "2": "Female"})
OUTCOMES = tuple(CategoricalColumn(c, codes=("0", "1")) for c in ("ACmortality", "MACE", "Coronary", "Stroke"))

CATEGORICAL_COLUMNS = (AGE, SEX) + OUTCOMES
NUMERIC_COLUMNS = ("SBP", "DBP", "B_hsTNT", "F_hsTnT")
SCHEMA_COLUMNS = tuple(c.name for c in CATEGORICAL_COLUMNS) + NUMERIC_COLUMNS

AGE_LEVELS = tuple(AGE.labels.get(c, c) for c in AGE.codes)
SEX_LEVELS = tuple(SEX.labels.get(c, c) for c in SEX.codes)

# first number in a cell, after grouping commas are dropped
_NUMBER_RE = r"([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"


def parse_number(series: pd.Series) -> pd.Series:
    """Lenient numeric parse: '1,234' -> 1234.0, '12 ng/L' -> 12.0, junk -> NaN."""
    s = series.astype(str).str.replace(",", "", regex=False)
    return pd.to_numeric(s.str.extract(_NUMBER_RE, expand=False), errors="coerce").astype(float)


def coerce_categorical(series: pd.Series, column: CategoricalColumn) -> pd.Series:
    # values outside the code set become NaN, the row itself is kept
    known = series.where(series.isin(column.codes))
    return pd.Series(
        pd.Categorical(known, categories=list(column.codes), ordered=column.ordered),
        index=series.index,
        name=column.name,
    )


def recode(series: pd.Series, mapping: dict) -> pd.Series:
    """Rename category labels; labels missing from `mapping` pass through, so recoding twice is a no-op."""
    return series.cat.rename_categories(lambda c: mapping.get(c, c))


def load_troponin(path) -> pd.DataFrame:
    df = pd.read_csv(Path(path), dtype=str, skipinitialspace=True)
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in SCHEMA_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"'{path}' is missing required columns: {missing}")

    for c in df.columns:
        if c in SCHEMA_COLUMNS:
            df[c] = df[c].str.strip()
    for column in CATEGORICAL_COLUMNS:
        df[column.name] = coerce_categorical(df[column.name], column)
    for name in NUMERIC_COLUMNS:
        df[name] = parse_number(df[name])
    return df


def recode_labels(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    for column in (SEX, AGE):
        out[column.name] = recode(out[column.name], column.labels)
    return out


def mean_arterial_pressure(sbp, dbp):
    """MAP = SBP/3 + 2*DBP/3, rounded to 2 decimals.

    Works on scalars or aligned Series; every row is computed independently
    of the others.
    """
    return np.round((1 / 3) * sbp + (2 / 3) * dbp, 2)


def troponin_delta(baseline, follow_up):
    return follow_up - baseline


def add_derived_columns(df: pd.DataFrame) -> pd.DataFrame:
    return df.assign(
        MAP=mean_arterial_pressure(df["SBP"], df["DBP"]),
        D_hsTNT=troponin_delta(df["B_hsTNT"], df["F_hsTnT"]),
    )


def prepare_troponin(path) -> pd.DataFrame:
    """Load, relabel and enrich; the returned frame is not modified afterwards."""
    return add_derived_columns(recode_labels(load_troponin(path)))


def describe_table(df: pd.DataFrame) -> None:
    print(f"Loaded {len(df)} rows x {df.shape[1]} columns")
    print(df.head())

    print("Summary Statistics:")
    print(df.describe(include='all'))

    print("Missing values per column:")
    print(df.isna().sum())
