"""
Repository external metadata: the external repo spec and the external services
a repository is synced from.
"""
from typing import Any, Dict, Iterable, List, Optional

from QueryRepair.Client.RepoUpdaterClient import RepoUpdaterClient
from QueryRepair.Model.Connection import Connection, ConnectionArgs
from QueryRepair.Model.ExternalService import ExternalServiceRecord
from QueryRepair.Model.Repository import ExternalRepoSpec
from QueryRepair.Utility.auth import Actor, check_current_user_is_site_admin

import logging
logger = logging.getLogger(__name__)


def new_external_services(raw_services: Iterable[Dict[str, Any]]) -> List[ExternalServiceRecord]:
    return [ExternalServiceRecord.from_api(raw) for raw in raw_services]


class ExternalServiceBusiness:

    def __init__(self, client: Optional[RepoUpdaterClient] = None):
        self.client = client or RepoUpdaterClient()

    def ExternalRepository(self, repo_id: int) -> Optional[ExternalRepoSpec]:
        return self.client.get_repo(repo_id).external_repo

    def ListExternalServices(self, actor: Actor, repo_id: int, args: Optional[ConnectionArgs] = None) -> Connection:
        # Only site admins may read external services, their config holds secrets.
        check_current_user_is_site_admin(actor)

        services = new_external_services(self.client.repo_external_services(repo_id))
        connection = (args or ConnectionArgs()).window(services)
        logger.info("Listing %d of %d external services for repo %s", len(connection.nodes), connection.total_count, repo_id)
        return connection
