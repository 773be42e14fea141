# pages/1_Contact.py

import streamlit as st

from portal.exceptions import StorageError
from portal.ui import field_styles, get_contact_form, render_field_error, require_access
from portal.validators import FIELDS

st.set_page_config(page_title="Contact", layout="wide")

require_access()

st.title("Contact Us")
st.markdown("Send us a message and we'll get back to you. Every field is required.")

form = get_contact_form()

# -------------------------
# Callbacks
# -------------------------
def _revalidate(field):
    form.revalidate(field, st.session_state.get(field))


def _submit():
    try:
        outcome = form.submit(st.session_state)
    except StorageError as e:
        st.session_state.submit_error = e
        return
    if outcome.accepted:
        st.session_state.flash = outcome.acknowledgment


# -------------------------
# Form
# -------------------------
styles = field_styles(form.errors, FIELDS)
if styles:
    st.markdown(styles, unsafe_allow_html=True)

st.text_input("Name", key="name", on_change=_revalidate, args=("name",))
render_field_error(form.errors, "name")

st.text_input("Email", key="email", on_change=_revalidate, args=("email",))
render_field_error(form.errors, "email")

st.text_input("Subject", key="subject", on_change=_revalidate, args=("subject",))
render_field_error(form.errors, "subject")

st.text_area("Message", key="message", on_change=_revalidate, args=("message",))
render_field_error(form.errors, "message")

st.button("Send message", type="primary", on_click=_submit)

# -------------------------
# Result
# -------------------------
if "submit_error" in st.session_state:
    st.error("Failed to save your message.")
    st.exception(st.session_state.pop("submit_error"))

if "flash" in st.session_state:
    st.success(st.session_state.pop("flash").replace("\n", "  \n"))

st.caption(f"{len(form.log)} submission(s) stored on this machine.")
