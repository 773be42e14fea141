import logging

import streamlit as st

from portal.ui import require_access

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(
    page_title="Veloce",
    layout="wide",
)


# --- Shared Password Gate ---
require_access()
# --- End Password Gate ---

st.title("Veloce")

st.markdown(
    """
Welcome to the Veloce workspace.

What this page includes:
- A contact form with inline validation
- A view of the submissions recorded on this machine

What this page intentionally excludes:
- Real authentication (the password only hides the content)
- Server-side validation or a central database
- Sharing submissions between browsers or machines
"""
)

st.info("Use the sidebar to open the contact form or the stored submissions.")
