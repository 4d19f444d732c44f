"""Shared theme helpers for the return-date calculator."""

from __future__ import annotations

import streamlit as st


def apply_theme() -> None:
    """Inject theme CSS for all pages."""
    st.markdown(
        """
        <style>
        :root {
            --fr-bg: #F8FAFC;
            --fr-surface: #FFFFFF;
            --fr-primary: #0D9488;
            --fr-ok: #10B981;
            --fr-ok-soft: #ECFDF5;
            --fr-wait: #FDA4AF;
            --fr-fever: #FDBA74;
            --fr-warn: #FEF3C7;
            --fr-text: #1E293B;
            --fr-muted: #64748B;
            --fr-border: #E2E8F0;
        }
        .stApp {
            background-color: var(--fr-bg);
            color: var(--fr-text);
        }
        .fr-result {
            background-color: var(--fr-surface);
            border: 2px solid var(--fr-ok);
            border-radius: 16px;
            padding: 24px;
            text-align: center;
        }
        .fr-result.fr-provisional {
            background-color: var(--fr-warn);
            border-color: #FCD34D;
        }
        .fr-result-date {
            font-size: 44px;
            font-weight: 800;
            color: var(--fr-text);
            letter-spacing: -0.02em;
        }
        .fr-badge {
            display: inline-block;
            padding: 4px 12px;
            margin: 8px 4px 0 4px;
            border-radius: 999px;
            font-size: 12px;
            font-weight: 700;
        }
        .fr-badge-onset {
            background-color: #FFF1F2;
            color: #BE123C;
        }
        .fr-badge-fever {
            background-color: #EFF6FF;
            color: #1D4ED8;
        }
        .fr-day {
            display: flex;
            align-items: center;
            gap: 16px;
            padding: 10px 16px;
            border-bottom: 1px solid var(--fr-border);
            background-color: var(--fr-surface);
        }
        .fr-day.fr-ok {
            background-color: var(--fr-ok-soft);
        }
        .fr-day.fr-return {
            background-color: #D1FAE5;
            box-shadow: inset 0 0 0 2px #34D399;
        }
        .fr-day-date {
            width: 120px;
            font-weight: 700;
        }
        .fr-day-caption {
            font-size: 12px;
            color: var(--fr-muted);
        }
        .fr-bar {
            height: 10px;
            width: 120px;
            border-radius: 999px;
            display: inline-block;
            margin-right: 8px;
        }
        .fr-bar-done { background-color: #34D399; }
        .fr-bar-onset { background-color: var(--fr-wait); }
        .fr-bar-fever { background-color: var(--fr-fever); }
        .fr-progress {
            font-size: 11px;
            color: var(--fr-muted);
        }
        .fr-marker {
            font-size: 11px;
            font-weight: 700;
            color: var(--fr-primary);
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_sidebar_branding() -> None:
    st.sidebar.markdown("**学校保健安全法に基づく目安**")
    st.sidebar.markdown("---")
