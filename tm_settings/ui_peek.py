from dataclasses import asdict
import pandas as pd
import streamlit as st
from .config import SETTINGS_HEADER, DEFAULT_SETTINGS
from .models import SettingRow

_SECRET_KEYS = {r[0] for r in DEFAULT_SETTINGS if r[3] == "secret"}

def is_secret(row: SettingRow) -> bool:
    # rows appended by set() carry no Type cell, so go by key as well
    return (row.type == "secret" or row.key in _SECRET_KEYS
            or row.key.upper().endswith("_API_KEY"))

def _mask(row: SettingRow) -> str:
    if is_secret(row) and row.value:
        tail = row.value[-4:] if len(row.value) > 12 else ""
        return "•" * 8 + tail
    return row.value

def settings_dataframe(rows: list[SettingRow]) -> pd.DataFrame:
    body = [[r.key, _mask(r), r.description, r.type] for r in rows]
    return pd.DataFrame(body, columns=SETTINGS_HEADER)

def peek_settings(store):
    # Renders the Settings tab as stored (secrets masked). Creates its own expander.
    with st.expander("Peek (Settings tab, as stored)"):
        try:
            rows = store.rows()
        except Exception as e:
            st.warning(f"Could not read the Settings tab: {e}")
            return
        if not rows:
            st.info("The Settings tab is missing or empty. Use 'Initialize Settings tab' in the sidebar.")
            return
        st.dataframe(settings_dataframe(rows), height=520, width='stretch')

def peek_bundles(store):
    with st.expander("Resolved configuration (with defaults)"):
        claude = asdict(store.get_claude_config())
        claude["api_key"] = "set" if claude["api_key"] else "not set"
        st.markdown("**Claude**")
        st.json(claude)
        st.markdown("**Profit thresholds**")
        st.json(asdict(store.get_profit_thresholds()))
        st.markdown("**Automation**")
        st.json(asdict(store.get_automation_config()))
        st.markdown("**Geographic**")
        st.json(asdict(store.get_geographic_config()))
