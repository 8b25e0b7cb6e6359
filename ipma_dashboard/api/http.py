# ipma_dashboard/api/http.py
import requests

from ipma_dashboard.config import HTTP_TIMEOUT_S

USER_AGENT = "IpmaDashboard/1.0 (+https://api.ipma.pt)"


def http_get_json(url: str, timeout: float = HTTP_TIMEOUT_S) -> dict | list:
    """GET *url* and return the decoded JSON document.

    Transport errors, HTTP error statuses and invalid JSON propagate
    unchanged; the IPMA fetch boundary logs them and retrying is left
    to the caller.
    """
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    resp = requests.get(url, timeout=timeout, headers=headers)
    resp.raise_for_status()
    return resp.json()
