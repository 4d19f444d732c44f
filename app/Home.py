"""Influenza school-return calculator Streamlit app."""

from __future__ import annotations

import html
import sys
from datetime import date
from pathlib import Path
from typing import List

import streamlit as st
import yaml

from theme import apply_theme, render_sidebar_branding

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = PROJECT_ROOT / "configs" / "config.yaml"

SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))
from flureturn.dates.helpers import format_date_jp
from flureturn.rules.eligibility import compute_return
from flureturn.rules.labels import (
    day_caption,
    fever_progress_label,
    markers,
    onset_progress_label,
    result_headline,
    timeline_frame,
)
from flureturn.rules.timeline import build_timeline
from flureturn.rules.types import CATEGORY_LABELS, ONSET_WAIT_DAYS, DayStatus, StudentCategory, category_hint, fever_wait_days
from flureturn.settings import load_app_settings

DISCLAIMER = [
    "本アプリの計算結果は「学校保健安全法」に基づく一般的な基準です。",
    "登校再開の最終的な判断は、必ず**医師、学校、またはお住まいの自治体の指示**に従ってください。",
    "「発症した後5日」とは、発症した日を0日目として翌日から数えて5日目までが出席停止期間となり、6日目が登校可能日となります。",
    "入力されたデータは、この画面の中でのみ処理され、外部へ送信・保存されることはありません。",
]


@st.cache_data
def load_config(config_path: Path) -> dict:
    path = config_path if config_path.is_absolute() else PROJECT_ROOT / config_path
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _select_category(default: StudentCategory) -> StudentCategory:
    options = list(StudentCategory)
    return st.radio(
        "1. お子様の区分",
        options,
        index=options.index(default),
        format_func=lambda c: f"{CATEGORY_LABELS[c]}（{category_hint(c)}）",
        horizontal=True,
    )


def _bar(done: bool, pending_class: str) -> str:
    css = "fr-bar-done" if done else pending_class
    return f'<span class="fr-bar {css}"></span>'


def _render_day(day: DayStatus, category: StudentCategory) -> str:
    classes = ["fr-day"]
    if day.status == "ok":
        classes.append("fr-ok")
    if day.is_return_date:
        classes.append("fr-return")

    progress = [
        _bar(day.day_num_from_onset > ONSET_WAIT_DAYS, "fr-bar-onset")
        + f'<span class="fr-progress">{onset_progress_label(day)}</span>'
    ]
    fever_label = fever_progress_label(day, category)
    if fever_label is not None:
        progress.append(
            _bar(day.day_num_from_fever > fever_wait_days(category), "fr-bar-fever")
            + f'<span class="fr-progress">{fever_label}</span>'
        )

    marker_html = " ".join(f'<span class="fr-marker">{html.escape(m)}</span>' for m in markers(day))
    return (
        f'<div class="{" ".join(classes)}">'
        f'<div class="fr-day-date">{format_date_jp(day.date)}'
        f'<div class="fr-day-caption">{day_caption(day)}</div></div>'
        f'<div>{"<br/>".join(progress)}</div>'
        f"<div>{marker_html}</div>"
        "</div>"
    )


def render_timeline(days: List[DayStatus], category: StudentCategory) -> None:
    st.subheader("経過タイムライン")
    st.caption("0日目＝発症日")
    st.markdown("".join(_render_day(day, category) for day in days), unsafe_allow_html=True)
    with st.expander("表形式で表示"):
        st.dataframe(timeline_frame(days, category), hide_index=True, use_container_width=True)


def render_result(onset: date, fever: date | None, category: StudentCategory) -> None:
    result = compute_return(onset, fever, category)
    if result is None:
        return

    provisional = fever is None
    if provisional:
        st.warning("解熱日が入力されていません。解熱日によって期間が延びる可能性があります。")

    badges = [f'<span class="fr-badge fr-badge-onset">発症から{result.days_from_onset}日経過</span>']
    if not provisional:
        badges.append(f'<span class="fr-badge fr-badge-fever">解熱から{result.days_from_fever}日経過</span>')

    st.markdown(
        f'<div class="fr-result{" fr-provisional" if provisional else ""}">'
        f"<h3>{result_headline(not provisional)}</h3>"
        "<p>この日に登校再開できます</p>"
        f'<div class="fr-result-date">{format_date_jp(result.can_return_date)}</div>'
        f"<p>{result.reason}</p>"
        f'<div>{"".join(badges)}</div>'
        "</div>",
        unsafe_allow_html=True,
    )

    days = build_timeline(onset, fever, result.can_return_date, category)
    render_timeline(days, category)


def main() -> None:
    cfg = load_config(DEFAULT_CONFIG)
    settings = load_app_settings(cfg)

    st.set_page_config(page_title=settings["title"], layout="centered")
    apply_theme()
    render_sidebar_branding()

    st.title(settings["title"])
    st.markdown(settings["subtitle"])

    category = _select_category(settings["default_category"])

    today = date.today()
    col_onset, col_fever = st.columns(2)
    with col_onset:
        onset = st.date_input("2. 発症日 (0日目)", value=None, max_value=today)
        st.caption("※病院を受診した日ではなく、**発熱などの症状が出始めた日**を入力してください。")
    with col_fever:
        fever = st.date_input("3. 解熱日 (0日目)", value=None, min_value=onset, disabled=onset is None)
        st.caption("※薬を使わずに平熱に戻り、そのまま下がっていることを確認した日。まだの場合は空欄でOKです。")

    if onset is None:
        st.info("発症日を入力すると、登校可能日を計算します。")
    else:
        render_result(onset, fever, category)

    st.markdown("---")
    st.markdown("**免責事項・注意事項**")
    st.markdown("\n".join(f"- {line}" for line in DISCLAIMER))


if __name__ == "__main__":
    main()
