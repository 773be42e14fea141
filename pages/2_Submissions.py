# pages/2_Submissions.py

import streamlit as st

from portal.records import records_frame
from portal.ui import get_contact_form, require_access

st.set_page_config(page_title="Submissions", layout="wide")

require_access()

st.title("Stored Submissions")
st.markdown("Contact form submissions recorded in local storage on this machine.")

form = get_contact_form()

if st.button("🔄 Reload from storage"):
    form.log.load()

# -------------------------
# Table
# -------------------------
df = records_frame(form.log)

st.metric("Submissions", len(df))

if df.empty:
    st.info("No submissions stored yet.")
else:
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button(
        "⬇️ Download as CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="submissions.csv",
        mime="text/csv",
    )

st.caption("Tip: Submissions are only ever appended. Clearing them means deleting the local storage file.")
