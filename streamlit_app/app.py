"""
Streamlit Dashboard for Staff Tag Governance.

This is an internal tool for:
- Browsing the staff talent roster as the league or as a club
- Editing tags on one staff member or in bulk
- Reviewing club tag change requests (league)
- Tracking sent requests (club)
- Managing tags across the roster

This UI calls TagGovernanceService (src/) for all data and rules.
Keep this simple; state lives for the browser session only.
"""

import streamlit as st
import pandas as pd

from database.enums import BulkAction
from src.exceptions import GovernanceError
from src.models import Actor
from src.services.governance import TagGovernanceService

# Page config
st.set_page_config(
    page_title="Staff Talent Tags",
    page_icon="🏷️",
    layout="wide",
    initial_sidebar_state="expanded"
)

if "governance" not in st.session_state:
    st.session_state.governance = TagGovernanceService.from_config()
    st.session_state.toasts = []
    st.session_state.governance.subscribe(
        lambda event: st.session_state.toasts.append(type(event).__name__)
    )

governance: TagGovernanceService = st.session_state.governance

# Title
st.title("🏷️ Staff Talent Tags")

# Sidebar
with st.sidebar:
    st.header("Acting As")
    view = st.radio("View", ["League", "Club"])
    if view == "League":
        actor = Actor.league_admin()
    else:
        actor = Actor.club(st.text_input("Club", value="Austin FC") or "Austin FC")

    pages = ["Roster", "Bulk Edit", "Manage Tags"]
    pages.insert(1, "Approvals" if actor.is_league_admin else "Sent Requests")
    page = st.radio("Select Page", pages)

    st.markdown("---")
    st.caption("Staff Tag Governance v0.1.0")

for toast in st.session_state.toasts:
    st.toast(toast)
st.session_state.toasts = []


def staff_frame(members) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "id": m.id,
            "name": m.name,
            "role": m.role,
            "club": m.club,
            "tags": ", ".join(m.tags),
            "privacy": m.profile_privacy.value,
        }
        for m in members
    ])


def run(action, *args, **kwargs):
    try:
        return action(*args, **kwargs)
    except GovernanceError as e:
        st.error(str(e))
        return None


tag_options = [entry.name for entry in governance.list_tags()]
visible = governance.visible_staff(actor)

if page == "Roster":
    st.header("👥 Roster")
    st.dataframe(staff_frame(visible), use_container_width=True, hide_index=True)

    st.subheader("Edit Tags")
    if visible:
        names = {m.id: f"{m.name} ({m.id})" for m in visible}
        staff_id = st.selectbox("Staff member", list(names), format_func=names.get)
        member = next(m for m in visible if m.id == staff_id)
        new_tags = st.multiselect(
            "Tags",
            sorted(set(tag_options) | set(member.tags)),
            default=member.tags,
            max_selections=governance.config.max_tags,
        )
        if st.button("Save Tags"):
            outcome = run(governance.propose_tag_change, staff_id, new_tags, actor)
            if outcome and outcome.applied:
                st.success("Tags updated")
            elif outcome:
                st.info("Change sent to the league for approval")

elif page == "Approvals":
    st.header("📥 Tag Change Approvals")
    pending = governance.list_pending()
    st.metric("Pending Approvals", len(pending))

    if not pending:
        st.info("No pending approvals")

    for request in pending:
        with st.container(border=True):
            st.markdown(f"**{request.staff_name}** · {request.requesting_actor}")
            st.caption(request.created_at.strftime("%Y-%m-%d %H:%M"))
            st.write(f"{', '.join(request.old_tags) or 'No tags'} → {', '.join(request.new_tags) or 'No tags'}")
            note = st.text_input("Note", key=f"note-{request.id}")
            col1, col2 = st.columns(2)
            with col1:
                if st.button("Approve", key=f"approve-{request.id}"):
                    run(governance.approve, request.id, note)
                    st.rerun()
            with col2:
                if st.button("Reject", key=f"reject-{request.id}"):
                    run(governance.reject, request.id, note)
                    st.rerun()

elif page == "Sent Requests":
    st.header("📤 Approval Requests")
    counts = governance.status_counts(actor.name)
    col1, col2, col3 = st.columns(3)
    col1.metric("Pending", counts["pending"])
    col2.metric("Approved", counts["approved"])
    col3.metric("Rejected", counts["rejected"])

    sent = governance.list_for_actor(actor.name)
    if sent:
        st.dataframe(pd.DataFrame([r.to_dict() for r in sent]), use_container_width=True, hide_index=True)
    else:
        st.info("No requests sent yet")

elif page == "Bulk Edit":
    st.header("🧰 Bulk Edit Tags")
    names = {m.id: f"{m.name} ({m.id})" for m in visible}
    selected = st.multiselect("Staff members", list(names), format_func=names.get)
    action = st.radio("Action", [a.value for a in BulkAction], horizontal=True)
    values = st.multiselect("Tags", tag_options)

    if st.button("Apply", disabled=not (selected and values)):
        outcome = run(governance.bulk_apply_tags, selected, action, values, actor)
        if outcome:
            st.success(str(outcome))

elif page == "Manage Tags":
    st.header("🗂️ Manage Tags")
    summary = governance.tag_summary()
    col1, col2 = st.columns(2)
    col1.metric("Total Tags", summary.total_tags)
    col2.metric("Tagged Staff", summary.tagged_staff)

    st.dataframe(
        pd.DataFrame([e.model_dump(exclude={"staff_ids"}) for e in governance.list_tags()]),
        use_container_width=True,
        hide_index=True,
    )

    if actor.is_league_admin:
        with st.form("create_tag_form"):
            new_name = st.text_input("Create New Tag", placeholder="Enter tag name...")
            if st.form_submit_button("Create") and run(governance.create_tag, new_name):
                st.rerun()

        with st.form("rename_tag_form"):
            old_name = st.selectbox("Tag", tag_options)
            renamed = st.text_input("New name")
            if st.form_submit_button("Rename"):
                count = run(governance.rename_tag, old_name, renamed)
                if count is not None:
                    st.success(f"Renamed on {count} staff")

        with st.form("delete_tag_form"):
            doomed = st.selectbox("Tag to delete", tag_options)
            if st.form_submit_button("Delete"):
                count = run(governance.delete_tag, doomed)
                if count is not None:
                    st.success(f"Removed from {count} staff")
    else:
        st.caption("Tag curation is done by the league office")

# Footer
st.markdown("---")
st.caption("Built with Streamlit")
