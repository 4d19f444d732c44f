"""Configuration section helpers."""

from __future__ import annotations

from typing import Any, Dict

from flureturn.rules.types import StudentCategory

DEFAULT_BATCH_COLUMNS = {
    "id_column": "student_id",
    "onset_column": "onset_date",
    "fever_column": "fever_date",
    "category_column": "category",
}


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{name} must be a mapping.")
    return section


def load_app_settings(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Extract UI settings, filling defaults."""
    app_cfg = _section(cfg, "app")
    return {
        "title": app_cfg.get("title", "インフルエンザ出席停止期間計算機"),
        "subtitle": app_cfg.get("subtitle", "発症日と解熱日を入力するだけで、最短の登校可能日を計算します。"),
        "default_category": StudentCategory.parse(app_cfg.get("default_category", StudentCategory.SCHOOL)),
    }


def load_batch_columns(cfg: Dict[str, Any]) -> Dict[str, str]:
    """Column names used by the batch CSV tool."""
    batch_cfg = _section(cfg, "batch")
    columns = dict(DEFAULT_BATCH_COLUMNS)
    for key in DEFAULT_BATCH_COLUMNS:
        if batch_cfg.get(key):
            columns[key] = str(batch_cfg[key])
    return columns


def reports_dir(cfg: Dict[str, Any]) -> str:
    return str(_section(cfg, "reports").get("output_dir", "reports"))
