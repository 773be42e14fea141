# portal/ui.py

# Streamlit glue shared by the pages: settings, the password gate, the
# per-session contact form and inline error rendering.

import html

import streamlit as st

from portal.config import load_settings
from portal.errors import ERROR_BORDER_WIDTH, ERROR_COLOR, error_element_id
from portal.form import ContactForm
from portal.gate import AccessGate, GateState
from portal.storage import ContactLog, FileStore


def get_settings():
    if "settings" not in st.session_state:
        st.session_state.settings = load_settings()
    return st.session_state.settings


# -------------------------
# Shared password gate
# -------------------------
def require_access(settings=None):
    settings = settings or get_settings()
    if "gate_state" not in st.session_state:
        st.session_state.gate_state = GateState()
    state = st.session_state.gate_state

    if state.content_visible:
        return

    st.title("Protected Workspace")
    pwd = st.text_input("Enter access password", type="password", key="admin_password")

    if pwd:
        AccessGate(settings.app_password, state).attempt(pwd)
        if state.content_visible:
            st.rerun()
        else:
            st.error(state.error)

    st.caption("This workspace is for internal use.")
    st.stop()


# -------------------------
# Contact form state
# -------------------------
@st.cache_resource
def shared_contact_log(path, key) -> ContactLog:
    """One log per storage entry for the whole server, loaded once."""
    log = ContactLog(FileStore(path), key)
    log.load()
    return log


def get_contact_form(settings=None) -> ContactForm:
    """Return this session's ContactForm over the shared contact log."""
    if "contact_form" not in st.session_state:
        settings = settings or get_settings()
        log = shared_contact_log(str(settings.storage_path), settings.storage_key)
        st.session_state.contact_form = ContactForm(log)
    return st.session_state.contact_form


# -------------------------
# Error rendering
# -------------------------
def field_styles(errors, fields) -> str:
    """CSS giving every styled field the error border."""
    rules = [
        f".st-key-{f} input, .st-key-{f} textarea "
        f"{{ border-color: {ERROR_COLOR} !important; border-width: {ERROR_BORDER_WIDTH} !important; }}"
        for f in fields
        if errors.is_styled(f)
    ]
    return f"<style>{' '.join(rules)}</style>" if rules else ""


def error_markup(errors, field) -> str:
    return (
        f'<span id="{error_element_id(field)}" '
        f'style="color: {ERROR_COLOR}; font-size: 12px; display: block; margin-top: 4px;">'
        f"{html.escape(errors.message(field))}</span>"
    )


def render_field_error(errors, field):
    if errors.has_slot(field):
        st.markdown(error_markup(errors, field), unsafe_allow_html=True)
