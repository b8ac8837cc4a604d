"""Streamlit UI for plann.er - two-step trip creation form.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import os  # noqa: E402
from datetime import date  # noqa: E402
from enum import IntEnum  # noqa: E402

import httpx  # noqa: E402
import streamlit as st  # noqa: E402

from ui.date_selection import DateSelection, select_date  # noqa: E402
from ui.helpers import (  # noqa: E402
    call_create_trip,
    error_message,
    month_weeks,
    parse_guest_emails,
    validate_trip_details,
)

# Configuration
BACKEND_URL = os.getenv("PLANNER_API_URL", "http://localhost:3333")


class StepForm(IntEnum):
    TRIP_DETAILS = 1
    ADD_EMAILS = 2


# Page config
st.set_page_config(page_title="plann.er", page_icon="🧳", layout="centered")

# Initialize session state
today = date.today()
for key, val in {
    "step": StepForm.TRIP_DETAILS,
    "selection": DateSelection(),
    "calendar_month": (today.year, today.month),
    "trip_id": None,
    "error": None,
}.items():
    if key not in st.session_state:
        st.session_state[key] = val


def _on_day_tap(day: date) -> None:
    st.session_state.selection = select_date(st.session_state.selection, day)


def _shift_month(delta: int) -> None:
    year, month = st.session_state.calendar_month
    month += delta
    if month == 0:
        year, month = year - 1, 12
    elif month == 13:
        year, month = year + 1, 1
    st.session_state.calendar_month = (year, month)


# Title
st.title("🧳 plann.er")
st.markdown("*Invite your friends and plan your next trip*")
st.divider()

editable = st.session_state.step == StepForm.TRIP_DETAILS
selection: DateSelection = st.session_state.selection

destination = st.text_input("📍 Where to?", key="destination", disabled=not editable)
st.text_input("📅 When?", value=selection.label, disabled=True)

# =============================================================================
# STEP 1 - CALENDAR
# =============================================================================
if editable:
    with st.expander("Select dates", expanded=selection.ends_at is None):
        st.caption("Select the departure and return dates of the trip")

        year, month = st.session_state.calendar_month
        nav_prev, nav_title, nav_next = st.columns([1, 3, 1])
        nav_prev.button("◀", on_click=_shift_month, args=(-1,), key="prev_month")
        nav_title.markdown(f"**{date(year, month, 1).strftime('%B %Y')}**")
        nav_next.button("▶", on_click=_shift_month, args=(1,), key="next_month")

        for week in month_weeks(year, month):
            cols = st.columns(7)
            for col, day in zip(cols, week):
                if day is None:
                    continue
                marked = selection.marked_dates.get(day.isoformat())
                col.button(
                    str(day.day),
                    key=f"day-{day.isoformat()}",
                    on_click=_on_day_tap,
                    args=(day,),
                    disabled=day < today,
                    type="primary" if marked else "secondary",
                    use_container_width=True,
                )

    if st.button("Continue ➡️", type="primary", use_container_width=True):
        problem = validate_trip_details(destination, st.session_state.selection)
        if problem:
            st.session_state.error = problem
        else:
            st.session_state.error = None
            st.session_state.step = StepForm.ADD_EMAILS
        st.rerun()

# =============================================================================
# STEP 2 - GUESTS
# =============================================================================
else:
    if st.button("⚙️ Change place/date", use_container_width=True):
        st.session_state.step = StepForm.TRIP_DETAILS
        st.rerun()

    with st.form("guests_form"):
        owner_name = st.text_input("Your name *")
        owner_email = st.text_input("Your e-mail *")
        guests_raw = st.text_area(
            "👥 Who will be on the trip?", help="Comma or line separated e-mails"
        )

        submitted = st.form_submit_button(
            "Confirm trip ➡️", type="primary", use_container_width=True
        )

        if submitted:
            if not owner_name.strip() or not owner_email.strip():
                st.session_state.error = "Fill in your name and e-mail"
            else:
                try:
                    response = call_create_trip(
                        backend_url=BACKEND_URL,
                        destination=destination.strip(),
                        selection=st.session_state.selection,
                        owner_name=owner_name.strip(),
                        owner_email=owner_email.strip(),
                        emails_to_invite=parse_guest_emails(guests_raw),
                    )
                    st.session_state.trip_id = response["trip_id"]
                    st.session_state.error = None
                except httpx.HTTPStatusError as e:
                    st.session_state.error = error_message(e)
                except httpx.HTTPError as e:
                    st.session_state.error = f"Could not reach the API: {e}"

# Show errors / result
if st.session_state.error:
    st.error(f"❌ {st.session_state.error}")

if st.session_state.trip_id:
    st.success(
        f"✅ Trip created! Check your inbox to confirm it (trip id `{st.session_state.trip_id}`)."
    )

st.caption(
    "By planning your trip with plann.er you automatically agree to our "
    "terms of use and privacy policies."
)
