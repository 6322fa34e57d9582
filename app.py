"""Veni Vici - Streamlit application."""

import streamlit as st
from datetime import datetime

from veni_vici.adapters import get_adapter
from veni_vici.bans import is_banned
from veni_vici.models import ArtworkRecord, BanCategory, BanEntry, BATCH_SIZE, FetchFailed, FetchOptions
from veni_vici.selection import refresh
from veni_vici.state import (
    BanToggled,
    HistoryCleared,
    RefreshCompleted,
    RefreshStarted,
    ViewerState,
    reduce,
)

# Configuration
CATALOG = "AIC"
FETCH_LIMIT_OPTIONS = [25, BATCH_SIZE, 100]
MAX_LOG_ENTRIES = 200
HISTORY_THUMB_WIDTH = 200
UNKNOWN_LABEL = "Unknown"

st.set_page_config(page_title="Veni Vici!", layout="wide")


# =============================================================================
# Session State Initialization
# =============================================================================

def init_session_state():
    """Initialize all session state variables."""
    defaults = {
        "viewer": ViewerState(),
        "debug_logs": [],
        # Options
        "fetch_limit": BATCH_SIZE,
        "ssl_bypass": False,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


init_session_state()


# =============================================================================
# Logging
# =============================================================================

def _append_log(level: str, message: str):
    """Append a log entry to session state."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    entry = f"{timestamp} | {level:<5} | {message}"
    st.session_state.debug_logs.append(entry)
    st.session_state.debug_logs = st.session_state.debug_logs[-MAX_LOG_ENTRIES:]


def log_event(message: str):
    _append_log("INFO", message)


# =============================================================================
# State Management
# =============================================================================

def dispatch(event) -> ViewerState:
    """Apply an event to the viewer state."""
    st.session_state.viewer = reduce(st.session_state.viewer, event)
    return st.session_state.viewer


def run_refresh():
    """Fetch, filter and pick a new artwork."""
    adapter = get_adapter(CATALOG)
    adapter.set_logger(_append_log)

    options = FetchOptions(
        limit=st.session_state.fetch_limit,
        ssl_bypass=st.session_state.ssl_bypass,
    )

    dispatch(RefreshStarted())
    result = FetchFailed(f"Error fetching artwork: Unexpected error from {adapter.name}.")
    try:
        with st.spinner(f"Fetching artworks from {adapter.name}..."):
            result = refresh(adapter, st.session_state.viewer.ban_list, options, log=_append_log)
    finally:
        dispatch(RefreshCompleted(result))


def on_ban_toggle(category: BanCategory, value: str):
    """Button callback for banning or unbanning an attribute value."""
    banned = is_banned(st.session_state.viewer.ban_list, category, value)
    dispatch(BanToggled(category, value))
    log_event(f"{'Unbanned' if banned else 'Banned'} {category.value}: {value}")


# =============================================================================
# UI Components
# =============================================================================

def render_attribute(record: ArtworkRecord, category: BanCategory):
    """Render one bannable attribute as a toggle button."""
    value = record.value_for(category)
    banned = is_banned(st.session_state.viewer.ban_list, category, value)

    label_col, value_col = st.columns([1, 3])
    label_col.write(f"**{category.label}:**")
    value_col.button(
        f"~~{value}~~" if banned else (value or UNKNOWN_LABEL),
        key=f"attr-{category.value}-{record.id}",
        on_click=on_ban_toggle,
        args=(category, value),
        disabled=not value,
        help="Click to unban" if banned else "Click to ban",
    )


def render_artwork_display(record: ArtworkRecord):
    """Render the current artwork."""
    col_image, col_meta = st.columns([3, 2], gap="large")

    with col_image:
        st.image(record.image_url(), caption=record.title, use_container_width=True)

    with col_meta:
        st.subheader(record.title or "Untitled")
        for category in BanCategory:
            render_attribute(record, category)
        if record.date:
            st.write(f"**Date:** {record.date}")
        if record.medium:
            st.write(f"**Medium:** {record.medium}")


def render_ban_entry(entry: BanEntry, index: int):
    tag_col, remove_col = st.columns([4, 1])
    tag_col.markdown(f"`{entry.category.value}` {entry.value}")
    remove_col.button(
        "×",
        key=f"unban-{index}",
        on_click=on_ban_toggle,
        args=(entry.category, entry.value),
        help="Remove from ban list",
    )


def render_sidebar():
    """Render the sidebar with ban list, history, options and debug console."""
    viewer: ViewerState = st.session_state.viewer

    with st.sidebar:
        st.subheader("Ban List")
        st.caption("Select an attribute in your listing to ban it")

        if not viewer.ban_list:
            st.caption("No items banned yet. Click on an attribute value to ban it.")
        for index, entry in enumerate(viewer.ban_list):
            render_ban_entry(entry, index)

        with st.expander(f"History ({len(viewer.history)})", expanded=False):
            if not viewer.history:
                st.caption("Nothing discovered yet.")
            for record in reversed(viewer.history):
                st.image(record.image_url(HISTORY_THUMB_WIDTH), width=HISTORY_THUMB_WIDTH)
                st.caption(f"{record.title or 'Untitled'} ({record.artist or UNKNOWN_LABEL})")
            if viewer.history and st.button("Clear History"):
                dispatch(HistoryCleared())
                st.rerun()

        st.subheader("Options")
        st.selectbox("Batch size", FETCH_LIMIT_OPTIONS, key="fetch_limit")
        st.checkbox("Bypass SSL verification", key="ssl_bypass", help="Use if you encounter SSL errors")

        # Debug console
        with st.expander("Debug Console", expanded=False):
            if st.button("Clear Logs"):
                st.session_state.debug_logs = []
            log_text = "\n".join(st.session_state.debug_logs) if st.session_state.debug_logs else "No logs yet."
            st.code(log_text, language=None)


# =============================================================================
# Main Application
# =============================================================================

def main():
    """Main application entry point."""
    # Discover something on first load
    if st.session_state.viewer.refresh_count == 0 and not st.session_state.viewer.loading:
        log_event("Initial load")
        run_refresh()

    st.markdown("## Veni Vici!")
    st.caption("Discover art from your wildest dreams!")

    if st.button("🔍 Discover!", type="primary", disabled=st.session_state.viewer.loading):
        log_event("Discover button clicked")
        run_refresh()

    viewer: ViewerState = st.session_state.viewer

    if viewer.error:
        st.error(viewer.error)

    if viewer.current is not None:
        render_artwork_display(viewer.current)

    render_sidebar()


if __name__ == "__main__":
    main()
