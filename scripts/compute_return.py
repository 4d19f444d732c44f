"""Compute the earliest school-return date for one student."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import yaml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from flureturn.dates.helpers import format_date_jp, to_calendar_date
from flureturn.rules.eligibility import compute_return
from flureturn.rules.labels import result_headline, timeline_frame
from flureturn.rules.timeline import build_timeline
from flureturn.rules.types import StudentCategory
from flureturn.settings import reports_dir

DEFAULT_CONFIG_PATH = Path("configs") / "config.yaml"


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute the earliest school-return date after influenza.")
    parser.add_argument("--onset", required=True, help="Onset date (YYYY-MM-DD), day 0.")
    parser.add_argument("--fever", default="", help="Fever-resolved date (YYYY-MM-DD). Leave empty if not yet known.")
    parser.add_argument(
        "--category",
        choices=["school", "preschool"],
        default="school",
        help="Student category (default: school).",
    )
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config YAML.")
    parser.add_argument("--write", action="store_true", help="Write JSON and Markdown reports to the reports dir.")
    return parser.parse_args(argv)


def load_config(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        cfg = yaml.safe_load(handle) or {}
    if not isinstance(cfg, dict):
        raise ValueError("Configuration must be a mapping.")
    return cfg


def build_payload(onset: Any, fever: Any, category: StudentCategory | str) -> Dict[str, Any] | None:
    """Result plus timeline as plain JSON-ready data, or None without an onset date."""
    category = StudentCategory.parse(category)
    result = compute_return(onset, fever, category)
    if result is None:
        return None
    fever_date = to_calendar_date(fever)
    days = build_timeline(onset, fever_date, result.can_return_date, category)
    frame = timeline_frame(days, category)
    return {
        "category": category.value,
        "onset_date": to_calendar_date(onset).isoformat(),
        "fever_date": fever_date.isoformat() if fever_date else None,
        "headline": result_headline(fever_date is not None),
        "can_return_date": result.can_return_date.isoformat(),
        "can_return_label": format_date_jp(result.can_return_date),
        "reason": result.reason,
        "days_from_onset": result.days_from_onset,
        "days_from_fever": result.days_from_fever,
        "provisional": not result.is_criterion_b_met,
        "timeline": json.loads(frame.to_json(orient="records", force_ascii=False)),
    }


def make_markdown(payload: Dict[str, Any]) -> str:
    lines = [
        f"# {payload['headline']}: {payload['can_return_label']}",
        f"- 区分: {payload['category']}",
        f"- 発症日: {payload['onset_date']}",
        f"- 解熱日: {payload['fever_date'] or '未入力'}",
        f"- 理由: {payload['reason']}",
        f"- 発症から{payload['days_from_onset']}日経過",
    ]
    if not payload["provisional"]:
        lines.append(f"- 解熱から{payload['days_from_fever']}日経過")
    lines.append("## タイムライン")
    lines.append("| 日付 | 経過 | 状態 | 発症 | 解熱 | 印 |")
    lines.append("|---|---|---|---|---|---|")
    for day in payload["timeline"]:
        lines.append(
            f"| {day['label']} | {day['caption']} | {day['status']} | {day['onset_progress']} "
            f"| {day['fever_progress']} | {day['markers']} |"
        )
    return "\n".join(lines)


def write_outputs(payload: Dict[str, Any], output_dir: Path) -> List[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    json_path = output_dir / f"return_{payload['onset_date']}_{timestamp}.json"
    md_path = output_dir / f"return_{payload['onset_date']}_{timestamp}.md"
    json_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    md_path.write_text(make_markdown(payload), encoding="utf-8")
    print(f"Wrote outputs to {json_path} and {md_path}")
    return [json_path, md_path]


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    cfg_path = args.config if args.config.is_absolute() else PROJECT_ROOT / args.config
    if not cfg_path.exists():
        print(f"Config not found: {cfg_path}", file=sys.stderr)
        sys.exit(1)
    cfg = load_config(cfg_path)

    try:
        payload = build_payload(args.onset, args.fever, args.category)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(2)
    if payload is None:
        print("Onset date is required.", file=sys.stderr)
        sys.exit(2)

    print(make_markdown(payload))
    if payload["provisional"]:
        print("\n解熱日が入力されていません。解熱日によって期間が延びる可能性があります。")

    if args.write:
        output_dir = Path(reports_dir(cfg))
        if not output_dir.is_absolute():
            output_dir = PROJECT_ROOT / output_dir
        write_outputs(payload, output_dir)


if __name__ == "__main__":
    main()
