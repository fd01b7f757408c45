"""
Records page: browse a collection, search it, page through it, edit records.

Features:
- Collection selector populated from the API
- Search across name, father/husband name, address, phone and email
- Previous / next pagination
- Edit form pre-filled with the record's values
"""
import streamlit as st

from config import PAGE_SIZE
from utils.api import APIClient, error_message
from utils.formatters import (
    EDITABLE_FIELDS,
    RECORD_COLUMNS,
    build_update_payload,
    edit_form_defaults,
    page_label,
    records_to_dataframe,
)
from utils.state import (
    ERROR,
    POPULATED,
    apply_page_result,
    can_go_next,
    can_go_prev,
    close_editor,
    init_state,
    next_page,
    open_editor_from_result,
    prev_page,
    select_collection,
    start_loading,
    submit_search,
)


def _load_collections(api: APIClient) -> list[str]:
    result = api.list_collections()
    data = result.get("data")
    if result["status"] == 200 and isinstance(data, dict) and data.get("success"):
        return data.get("collections") or []
    st.warning(f"Failed to fetch collections: {error_message(result)}")
    return []


def _render_controls(api: APIClient):
    state = st.session_state
    collections = _load_collections(api)
    options = [""] + sorted(collections)
    current = state.current_collection if state.current_collection in options else ""

    col_select, col_search = st.columns([1, 2])
    with col_select:
        selected = st.selectbox(
            "Collection",
            options,
            index=options.index(current),
            format_func=lambda c: c or "-- Select a collection --",
        )
    if selected != state.current_collection:
        select_collection(state, selected)

    with col_search:
        # Keyed per collection so switching collections clears the input
        with st.form(f"search_form_{state.current_collection}", border=False):
            term = st.text_input(
                "Search",
                value=state.current_search,
                placeholder="Name, address, phone...",
            )
            if st.form_submit_button("Search"):
                submit_search(state, term)


def _render_table(api: APIClient, records: list[dict]):
    headers = [header for _, header in RECORD_COLUMNS] + ["Actions"]
    widths = [2, 2, 3, 2, 1]

    for col, header in zip(st.columns(widths), headers):
        col.markdown(f"**{header}**")

    table = records_to_dataframe(records)
    for (_, row), record in zip(table.iterrows(), records):
        cols = st.columns(widths)
        for col, value in zip(cols, row.tolist()):
            col.write(value)
        if cols[-1].button("Edit", key=f"edit_{record['_id']}"):
            result = api.get_record(st.session_state.current_collection, record["_id"])
            if open_editor_from_result(st.session_state, result):
                st.rerun()
            st.error(f"Failed to load record: {error_message(result)}")


def _render_pagination():
    state = st.session_state
    col_prev, col_info, col_next = st.columns([1, 2, 1])
    if col_prev.button("← Previous", disabled=not can_go_prev(state), use_container_width=True):
        prev_page(state)
        st.rerun()
    col_info.markdown(
        f'<div class="page-info">{page_label(state.current_page, state.total_pages)}</div>',
        unsafe_allow_html=True,
    )
    if col_next.button("Next →", disabled=not can_go_next(state), use_container_width=True):
        next_page(state)
        st.rerun()


def _render_editor(api: APIClient):
    state = st.session_state
    record = state.editing_record
    record_id = record["_id"]
    defaults = edit_form_defaults(record)

    st.subheader("Edit record")
    with st.form(f"edit_form_{record_id}"):
        values = {
            field: st.text_input(label, value=defaults[field], key=f"edit_{field}_{record_id}")
            for field, label in EDITABLE_FIELDS
        }
        col_save, col_cancel = st.columns(2)
        saved = col_save.form_submit_button("Save", type="primary", use_container_width=True)
        cancelled = col_cancel.form_submit_button("Cancel", use_container_width=True)

    if cancelled:
        close_editor(state)
        st.rerun()

    if saved:
        result = api.update_record(
            state.current_collection, record_id, build_update_payload(values)
        )
        data = result.get("data")
        if result["status"] == 200 and isinstance(data, dict) and data.get("success"):
            close_editor(state, "Record updated successfully!")
            st.rerun()
        else:
            st.error(f"Failed to update record: {error_message(result)}")


def render(api: APIClient):
    """Render the records page."""
    state = st.session_state
    init_state(state, PAGE_SIZE)

    _render_controls(api)

    if state.flash_message:
        st.success(state.flash_message)
        state.flash_message = None

    if not state.current_collection:
        st.info("📭 No data. Select a collection to view its records.")
        return

    start_loading(state)
    with st.spinner("Loading records..."):
        result = api.list_records(
            state.current_collection,
            page=state.current_page,
            limit=state.page_size,
            search=state.current_search or None,
        )
    records = apply_page_result(state, result)

    if state.view_status == ERROR:
        st.error(f"Failed to fetch data: {state.view_error}")
        st.info("📭 No data to display.")
        return

    if state.view_status == POPULATED:
        _render_table(api, records)
    else:
        st.info("📭 No records found.")

    _render_pagination()

    if state.editing_record:
        st.divider()
        _render_editor(api)
