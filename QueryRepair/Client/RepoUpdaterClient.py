"""
Lightweight repo-updater API client to centralize HTTP interactions and error handling.
"""
from typing import Any, Dict, List, Optional
import requests

from QueryRepair.Exception.ApiError import RepoNotFoundError, RepoUpdaterError
from QueryRepair.Model.Repository import Repository
from QueryRepair.Utility.env import get_repo_updater_timeout, get_repo_updater_url

import logging
logger = logging.getLogger(__name__)


class RepoUpdaterClient:
    def __init__(self, base: Optional[str] = None, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.base = (base or get_repo_updater_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_repo_updater_timeout()

    def _handle_response(self, response: requests.Response, repo_id: Optional[int] = None) -> Any:
        if response.status_code == 404:
            raise RepoNotFoundError(repo_id)
        elif response.status_code != 200:
            raise RepoUpdaterError(f"repo-updater error: {response.status_code}", response.status_code)
        try:
            return response.json()
        except ValueError:
            raise RepoUpdaterError("repo-updater returned invalid JSON", 502)

    def get_repo(self, repo_id: int) -> Repository:
        url = f"{self.base}/repos/{repo_id}"
        response = self.session.get(url, timeout=self.timeout)
        return Repository.from_api(self._handle_response(response, repo_id))

    def repo_external_services(self, repo_id: int) -> List[Dict[str, Any]]:
        url = f"{self.base}/repo-external-services"
        response = self.session.post(url, json={"ID": repo_id}, timeout=self.timeout)
        data = self._handle_response(response, repo_id)
        services = data.get("ExternalServices") or []
        logger.info("repo-updater returned %d external services for repo %s", len(services), repo_id)
        return services
