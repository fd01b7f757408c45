"""
Frontend test fixtures and mocks.

Mocks Streamlit session_state and API responses for isolated testing.
"""
import pytest


class MockSessionState(dict):
    """Mock st.session_state that behaves like both dict and attribute access."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'SessionState' has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def mock_session_state():
    """Provide an empty mock session state."""
    return MockSessionState()


@pytest.fixture
def browsing_state():
    """Session state of a user on page 2 of 3 of 'Sheet1', searching 'ward'."""
    from frontend.utils.state import POPULATED, init_state

    state = MockSessionState()
    init_state(state, page_size=10)
    state.update({
        "current_collection": "Sheet1",
        "current_page": 2,
        "total_pages": 3,
        "current_search": "ward",
        "view_status": POPULATED,
    })
    return state


@pytest.fixture
def sample_record():
    """Sample record as returned by the API."""
    return {
        "_id": "507f1f77bcf86cd799439011",
        "name": "Asha Devi",
        "fatherName": "Ram Prasad",
        "address": "12 Lotus Lane",
        "phoneNumber": "9876500001",
        "additionalInfo": {"NAME": "Asha Devi"},
    }


@pytest.fixture
def mock_api_responses(sample_record):
    """Common API client results."""
    return {
        "page_ok": {
            "status": 200,
            "data": {
                "success": True,
                "total": 15,
                "page": 1,
                "limit": 10,
                "totalPages": 2,
                "data": [sample_record],
            },
        },
        "page_empty": {
            "status": 200,
            "data": {
                "success": True,
                "total": 0,
                "page": 1,
                "limit": 10,
                "totalPages": 0,
                "data": [],
            },
        },
        "server_error": {
            "status": 500,
            "data": {"success": False, "error": "Database is unreachable"},
        },
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }
