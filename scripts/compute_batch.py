"""Compute return dates for a CSV roster of students."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import yaml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from flureturn.rules.eligibility import compute_return
from flureturn.rules.types import StudentCategory
from flureturn.settings import load_batch_columns

DEFAULT_CONFIG_PATH = Path("configs") / "config.yaml"
RESULT_DTYPES = {
    "can_return_date": "string",
    "reason": "string",
    "days_from_onset": "Int64",
    "days_from_fever": "Int64",
    "provisional": "boolean",
    "error": "string",
}
RESULT_COLUMNS = list(RESULT_DTYPES)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute school-return dates for every row of a CSV.")
    parser.add_argument("--input", type=Path, required=True, help="CSV with onset/fever dates per student.")
    parser.add_argument("--output", type=Path, default=None, help="Output CSV (default: batch.output_path).")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config YAML.")
    return parser.parse_args(argv)


def load_config(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        cfg = yaml.safe_load(handle) or {}
    if not isinstance(cfg, dict):
        raise ValueError("Configuration must be a mapping.")
    return cfg


def compute_frame(df: pd.DataFrame, cfg: Dict[str, Any]) -> pd.DataFrame:
    """Append result columns.

    Rows without an onset date get empty results; rows with an unreadable
    date or category get only the ``error`` column filled.
    """
    columns = load_batch_columns(cfg)
    onset_col = columns["onset_column"]
    fever_col = columns["fever_column"]
    category_col = columns["category_column"]

    if onset_col not in df.columns:
        raise ValueError(f"onset column '{onset_col}' not found")

    records = []
    for _, row in df.iterrows():
        category = row.get(category_col) if category_col in df.columns else None
        if pd.isna(category) or not str(category).strip():
            category = StudentCategory.SCHOOL
        try:
            result = compute_return(row.get(onset_col), row.get(fever_col), category)
        except ValueError as exc:
            records.append({"error": str(exc)})
            continue
        if result is None:
            records.append({})
            continue
        records.append(
            {
                "can_return_date": result.can_return_date.isoformat(),
                "reason": result.reason,
                "days_from_onset": result.days_from_onset,
                "days_from_fever": result.days_from_fever,
                "provisional": not result.is_criterion_b_met,
            }
        )

    results = pd.DataFrame(records, columns=RESULT_COLUMNS, index=df.index).astype(RESULT_DTYPES)
    out = df.drop(columns=[c for c in RESULT_COLUMNS if c in df.columns])
    return pd.concat([out, results], axis=1)


def _print_summary(df: pd.DataFrame, id_col: str) -> None:
    computed = df["can_return_date"].notna()
    failed = df["error"].notna()
    provisional = df["provisional"].fillna(False).sum()
    print("Return date summary:")
    print(f"Rows: {len(df)}, computed: {int(computed.sum())}, without onset: {int((~computed & ~failed).sum())}")
    print(f"Provisional (no fever date): {int(provisional)}")
    if computed.any():
        print(f"Reasons: {df.loc[computed, 'reason'].value_counts().to_dict()}")
    if failed.any():
        ids = df.loc[failed, id_col].tolist() if id_col in df.columns else df.index[failed].tolist()
        print(f"Rows with invalid input ({id_col}): {ids}", file=sys.stderr)


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    cfg_path = args.config if args.config.is_absolute() else PROJECT_ROOT / args.config
    if not cfg_path.exists():
        print(f"Config not found: {cfg_path}", file=sys.stderr)
        sys.exit(1)
    cfg = load_config(cfg_path)

    if not args.input.exists():
        raise FileNotFoundError(f"Input roster not found: {args.input}")
    roster = pd.read_csv(args.input, dtype=str, keep_default_na=False)

    output_path = args.output
    if output_path is None:
        output_path = Path((cfg.get("batch") or {}).get("output_path", "reports/return_dates.csv"))
        if not output_path.is_absolute():
            output_path = PROJECT_ROOT / output_path

    try:
        result = compute_frame(roster, cfg)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(2)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    result.to_csv(output_path, index=False)

    _print_summary(result, load_batch_columns(cfg)["id_column"])
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
