from __future__ import annotations
import logging
import os

import streamlit as st
import gspread
from google.oauth2.service_account import Credentials

from tm_settings.config import DEFAULT_SHEET_URL, SETTINGS_SHEET, SETTINGS_CACHE_TTL_SEC
from tm_settings.quotas import with_backoff
from tm_settings.sheets import (
    BackingStoreUnavailable,
    GspreadSettingsTable,
    get_or_create_settings_sheet,
    seed_default_settings,
)
from tm_settings.store import SettingsStore
from tm_settings.ui_peek import peek_settings, peek_bundles

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"),
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("tm_settings.app")


@st.cache_resource(show_spinner=False)
def get_gspread_client() -> gspread.Client:
    creds_dict = dict(st.secrets.get("gcp_service_account", {}))  # type: ignore
    if not creds_dict:
        st.error("Missing service account in secrets (gcp_service_account).")
        st.stop()
    scopes = ["https://www.googleapis.com/auth/spreadsheets"]
    credentials = Credentials.from_service_account_info(creds_dict, scopes=scopes)
    return gspread.authorize(credentials)

@st.cache_resource(show_spinner=False)
def open_spreadsheet(spreadsheet_url: str) -> gspread.Spreadsheet:
    client = get_gspread_client()
    return with_backoff(client.open_by_url, spreadsheet_url)

def _ttl_from_env() -> float:
    raw = os.environ.get("SETTINGS_CACHE_TTL_SEC", "").strip()
    try:
        return float(raw) if raw else SETTINGS_CACHE_TTL_SEC
    except ValueError:
        logger.warning("ignoring bad SETTINGS_CACHE_TTL_SEC=%r", raw)
        return SETTINGS_CACHE_TTL_SEC

@st.cache_resource(show_spinner=False)
def get_settings_store(spreadsheet_url: str) -> SettingsStore:
    # one store per workbook, shared by every session of this process
    table = GspreadSettingsTable(open_spreadsheet(spreadsheet_url), SETTINGS_SHEET)
    return SettingsStore(table, ttl_sec=_ttl_from_env())

def initialize_settings_tab(ss, store: SettingsStore) -> int:
    ws = get_or_create_settings_sheet(ss, SETTINGS_SHEET)
    written = seed_default_settings(ws)
    store.table.forget()
    store.clear_cache()
    return written


# ---------- page ----------
st.set_page_config(page_title="ThriftyMobile Settings", page_icon="⚙️", layout="wide")
st.title("⚙️ ThriftyMobile Settings")
st.caption("Values live in the workbook's Settings tab. Reads are cached for a few minutes; saving a value takes effect immediately.")

SHEET_URL = st.secrets.get("SHEET_URL", DEFAULT_SHEET_URL)
if not SHEET_URL:
    st.error("Missing SHEET_URL in secrets and no DEFAULT_SHEET_URL set.")
    st.stop()

ss = open_spreadsheet(SHEET_URL)
store = get_settings_store(SHEET_URL)

# ---------- sidebar ----------
with st.sidebar:
    st.subheader("Workbook")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("🧱 Initialize Settings tab"):
            try:
                n = initialize_settings_tab(ss, store)
                st.toast(f"Seeded {n} default settings." if n else "Settings already initialized.", icon="✅")
            except Exception as e:
                st.error(f"Could not initialize: {e}")
    with col2:
        if st.button("🧹 Clear caches"):
            store.clear_cache()
            st.cache_data.clear()
            st.rerun()

    if not store.get_claude_config().api_key:
        st.warning("⚠️ Claude API key not configured. AI analysis is unavailable until it is set.")

# ---------- api keys ----------
with st.form("api_keys", clear_on_submit=True):
    st.subheader("🔑 Configure API keys")
    api_key = st.text_input("Claude API key (leave blank to skip)", type="password")
    if st.form_submit_button("Save"):
        if api_key:
            try:
                store.set("CLAUDE_API_KEY", api_key)
                st.success("✅ Claude API key saved!")
            except BackingStoreUnavailable as e:
                st.error(f"❌ {e}. Initialize the Settings tab first.")

# ---------- edit ----------
with st.form("edit_setting"):
    st.subheader("✏️ Edit a setting")
    key = st.text_input("Key", placeholder="e.g. MIN_PROFIT_PERCENT").strip()
    value = st.text_input("Value", value="")
    if st.form_submit_button("Save setting"):
        try:
            if not key:
                raise ValueError("Enter a key.")
            store.set(key, value)
            st.success(f"✅ {key} saved.")
        except BackingStoreUnavailable as e:
            st.error(f"❌ {e}. Initialize the Settings tab first.")
        except Exception as e:
            st.error(f"❌ {e}")

# ---------- peek ----------
peek_bundles(store)
peek_settings(store)
