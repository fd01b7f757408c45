"""
Records view state and its transitions.

Functions take ``st.session_state`` (or any mutable mapping) so they can be
exercised without a running Streamlit app.
"""
from typing import MutableMapping, Optional

from .api import error_message

# Main view states
EMPTY = "empty"
LOADING = "loading"
POPULATED = "populated"
ERROR = "error"


def init_state(state: MutableMapping, page_size: int = 10) -> None:
    """Initialize session state variables."""
    defaults = {
        "current_collection": "",
        "current_page": 1,
        "total_pages": 1,
        "page_size": page_size,
        "current_search": "",
        "view_status": EMPTY,
        "view_error": None,
        "editing_record": None,
        "flash_message": None,
    }
    for key, value in defaults.items():
        if key not in state:
            state[key] = value


def select_collection(state: MutableMapping, collection: str) -> None:
    """Switch collection: back to page 1 with the search cleared."""
    state["current_collection"] = collection
    state["current_page"] = 1
    state["current_search"] = ""
    state["editing_record"] = None


def submit_search(state: MutableMapping, term: str) -> None:
    state["current_search"] = (term or "").strip()
    state["current_page"] = 1


def can_go_prev(state: MutableMapping) -> bool:
    return state["current_page"] > 1


def can_go_next(state: MutableMapping) -> bool:
    return state["current_page"] < state["total_pages"]


def prev_page(state: MutableMapping) -> bool:
    """Step back one page; returns False when already on the first page."""
    if not can_go_prev(state):
        return False
    state["current_page"] -= 1
    return True


def next_page(state: MutableMapping) -> bool:
    """Step forward one page; returns False when already on the last page."""
    if not can_go_next(state):
        return False
    state["current_page"] += 1
    return True


def start_loading(state: MutableMapping) -> None:
    state["view_status"] = LOADING
    state["view_error"] = None


def apply_page_result(state: MutableMapping, result: dict) -> list[dict]:
    """
    Record the outcome of a page fetch and return the records to display.

    Moves the view to POPULATED when records came back, EMPTY when the page
    is empty, and ERROR (with ``view_error`` set) when the fetch failed.
    """
    data = result.get("data") if result.get("status") == 200 else None
    if not isinstance(data, dict) or not data.get("success"):
        state["view_status"] = ERROR
        state["view_error"] = error_message(
            result, f"Unexpected response (status {result.get('status')})"
        )
        return []

    state["total_pages"] = data.get("totalPages", 0)
    records = data.get("data") or []
    state["view_status"] = POPULATED if records else EMPTY
    state["view_error"] = None
    return records


def open_editor(state: MutableMapping, record: dict) -> None:
    state["editing_record"] = record


def close_editor(state: MutableMapping, message: Optional[str] = None) -> None:
    state["editing_record"] = None
    state["flash_message"] = message


def open_editor_from_result(state: MutableMapping, result: dict) -> bool:
    """Open the editor on a freshly fetched record; False when the fetch failed."""
    data = result.get("data") if result.get("status") == 200 else None
    if not isinstance(data, dict) or not data.get("success"):
        return False
    open_editor(state, data["data"])
    return True
