from typing import Optional

import requests


class APIClient:
    """Simple API client for backend requests."""

    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _parse_json(self, resp) -> Optional[dict]:
        """Safely parse JSON, return None or text on failure."""
        try:
            if resp is None:
                return None
            if not resp.text:
                return None
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _request(self, method: str, endpoint: str, **kwargs) -> dict:
        try:
            resp = requests.request(
                method,
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        """Make GET request."""
        return self._request("GET", endpoint, params=params or {})

    def _put(self, endpoint: str, data: dict) -> dict:
        """Make PUT request."""
        return self._request("PUT", endpoint, json=data)

    # Health / server endpoints
    def health(self) -> dict:
        """Check API liveness."""
        return self._get("/health")

    def get_server_info(self) -> dict:
        """Get hostname, network addresses and port of the API server."""
        return self._get("/api/server-info")

    # Collections endpoints
    def list_collections(self) -> dict:
        """List all collections."""
        return self._get("/api/collections")

    def list_records(
        self,
        collection: str,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
    ) -> dict:
        """Get one page of records, optionally filtered by a search term."""
        params = {"page": page, "limit": limit}
        if search:
            params["search"] = search
        return self._get(f"/api/collections/{collection}", params)

    def get_record(self, collection: str, record_id: str) -> dict:
        """Get a single record."""
        return self._get(f"/api/collections/{collection}/{record_id}")

    def update_record(self, collection: str, record_id: str, fields: dict) -> dict:
        """Send a partial update for a record."""
        return self._put(f"/api/collections/{collection}/{record_id}", fields)


def error_message(result: dict, default: str = "Request failed") -> str:
    """Extract the error text from an API client result."""
    data = result.get("data")
    if isinstance(data, dict):
        if data.get("error"):
            return str(data["error"])
        if data.get("raw"):
            return str(data["raw"])
    return result.get("error") or default


def check_server_status(api: APIClient) -> str:
    """
    Server status label for the sidebar badge.

    Offline when the API cannot be reached, Error when it answers with a
    failure (including an unreachable database), Online otherwise.
    """
    result = api.health()
    if result["status"] == 0:
        return "Offline"
    if result["status"] != 200:
        return "Error"
    if api.list_collections()["status"] != 200:
        return "Error"
    return "Online"
