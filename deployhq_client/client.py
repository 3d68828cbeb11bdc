# deployhq_client/client.py
"""DeployHQ resource facade - one method per remote operation."""

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from deployhq_client.core.factory import ClientConfigFactory
from deployhq_client.resources.schemas import (
    CommandCreate,
    CommandFields,
    DeploymentCreate,
    DeploymentFields,
    ProjectCreate,
    ProjectFields,
    RepositoryCreate,
    RepositoryFields,
    ServerCreate,
    serialize,
)
from deployhq_client.transport.executor import RequestExecutor

logger = logging.getLogger(__name__)


ALL_SERVERS = "all"


class DeployHQClient:
    """Client for the DeployHQ REST API.

    Holds a RequestExecutor and nothing else; every method maps to exactly
    one HTTP round trip.
    """

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    @staticmethod
    def create(
        subdomain: str,
        username: str,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        **options: Any,
    ) -> "DeployHQClient":
        """
        Build a client for an account.

        Args:
            subdomain: Account subdomain (``acme`` for acme.deployhq.com)
            username: API username, normally an email address
            api_key: API key
            session: Optional requests session to send through
            **options: service_host, timeout, user_agent, content_type

        Raises:
            DeployHQConfigurationError: If any credential is missing
        """
        config = ClientConfigFactory.create(
            subdomain=subdomain,
            username=username,
            api_key=api_key,
            **options,
        )
        return DeployHQClient(RequestExecutor(config, session=session))

    def close(self) -> None:
        self.executor.close()

    def __enter__(self) -> "DeployHQClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ============================================
    # Projects
    # ============================================

    def projects(self) -> List[Dict[str, Any]]:
        """List all projects."""
        return self.executor.get("projects")

    def project(self, permalink: str) -> Dict[str, Any]:
        return self.executor.get(f"projects/{permalink}")

    def create_project(self, name: str) -> Any:
        payload = ProjectCreate(project=ProjectFields(name=name))
        return self.executor.post("projects", serialize(payload))

    def delete_project(self, permalink: str) -> Any:
        return self.executor.delete(f"projects/{permalink}")

    def project_latest(self, permalink: str, branch: str = "") -> Any:
        """
        Get the latest repository revision for a project.

        Args:
            permalink: Project permalink
            branch: Restrict the lookup to a branch; omitted when empty
        """
        query = f"?branch={branch}" if branch else ""
        return self.executor.get(f"projects/{permalink}/repository/latest_revision{query}")

    def add_repository(
        self,
        permalink: str,
        scm_type: str,
        url: str,
        branch: str = "master",
    ) -> Any:
        payload = RepositoryCreate(
            repository=RepositoryFields(scm_type=scm_type, url=url, branch=branch)
        )
        return self.executor.post(f"projects/{permalink}/repository", serialize(payload))

    # ============================================
    # Servers
    # ============================================

    def servers(self, permalink: str) -> List[Dict[str, Any]]:
        return self.executor.get(f"projects/{permalink}/servers")

    def add_server(self, permalink: str, data: Dict[Any, Any]) -> Any:
        """Add a server; ``data`` is sent as the server object verbatim."""
        payload = ServerCreate(server=data)
        return self.executor.post(f"projects/{permalink}/servers", serialize(payload))

    # ============================================
    # Commands
    # ============================================

    def add_command(
        self,
        permalink: str,
        description: str,
        command: str,
        when: str = "after_changes",
        timing: str = "all",
        servers: Any = ALL_SERVERS,
        halt_on_error: bool = False,
    ) -> Any:
        """
        Add an SSH command hook that runs during deployments.

        Args:
            permalink: Project permalink
            description: Human-readable label
            command: Shell command to run
            when: Deployment stage callback (sent as ``cback``)
            timing: Which deployments the command runs on
            servers: ``"all"`` or server identifiers, sent as given
            halt_on_error: Stop the deployment if the command fails
        """
        extra: Dict[str, Any] = {}
        if isinstance(servers, str) and servers == ALL_SERVERS:
            extra["all_servers"] = True
        else:
            # TODO: resolve server names/domains to identifiers via servers()
            logger.debug(f"Passing server identifiers through unresolved: {servers!r}")

        fields = CommandFields(
            description=description,
            command=command,
            cback=when,
            timing=timing,
            halt_on_error=halt_on_error,
            server_identifiers=servers,
            **extra,
        )
        payload = CommandCreate(command=fields)
        return self.executor.post(f"projects/{permalink}/commands", serialize(payload))

    # ============================================
    # Deployments
    # ============================================

    def deployments(self, permalink: str) -> Any:
        return self.executor.get(f"projects/{permalink}/deployments")

    def deployment(self, permalink: str, uuid: str) -> Dict[str, Any]:
        return self.executor.get(f"projects/{permalink}/deployments/{uuid}")

    def create_deployment(
        self,
        permalink: str,
        parent_uuid: str,
        start_revision: str,
        end_revision: Union[str, int] = "",
        mode: bool = True,
        email_notify: bool = True,
        copy_config: bool = True,
    ) -> Any:
        """
        Queue (or preview) a deployment.

        Args:
            permalink: Project permalink
            parent_uuid: Server or server group identifier to deploy to
            start_revision: Accepted but not forwarded; the service always
                receives an empty start revision
            end_revision: Revision to deploy to
            mode: True queues the deployment, False only previews it
            email_notify: Send email notification
            copy_config: Copy the project's config files
        """
        payload = DeploymentCreate(
            deployment=DeploymentFields(
                parent_identifier=str(parent_uuid),
                start_revision="",
                end_revision=end_revision or "",
                mode="queue" if mode else "preview",
                copy_config_files=1 if copy_config else 0,
                email_notify=1 if email_notify else 0,
            )
        )
        return self.executor.post(f"projects/{permalink}/deployments", serialize(payload))

    # ============================================
    # Server groups
    # ============================================

    def server_groups(self, permalink: str) -> List[Dict[str, Any]]:
        return self.executor.get(f"projects/{permalink}/server_groups")
