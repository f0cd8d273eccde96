"""API level errors raised by the business layer and mapped to HTTP responses by the routes."""
from typing import Optional


class ApiError(Exception):

    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

"""Raised when the current caller is not allowed to read the requested resource."""
class UnauthorizedError(ApiError):
    def __init__(self, message: str = "must be site admin"):
        super().__init__(message, 401)

"""Raised when the repo-updater service answers with a non-success status.
        Attributes:
            status_code: HTTP status returned by the upstream service
            message: message from the upstream service (if any)
"""
class RepoUpdaterError(ApiError):
    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message, status_code)

"""Raised when the repo-updater service does not know the repository."""
class RepoNotFoundError(RepoUpdaterError):
    def __init__(self, repo_id: Optional[int] = None):
        super().__init__(f"Repository not found: {repo_id}", 404)
        self.repo_id = repo_id
