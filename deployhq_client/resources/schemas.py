"""Pydantic request payloads, one per remote operation that sends a body."""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field


# ============================================
# Projects
# ============================================

# Caller-supplied values are forwarded as given; only fields the client
# computes itself are constrained.
Revision = Union[str, int]


class ProjectFields(BaseModel):
    name: Any


class ProjectCreate(BaseModel):
    """Body for POST projects."""

    project: ProjectFields


class RepositoryFields(BaseModel):
    scm_type: Any
    url: Any
    branch: Any = "master"


class RepositoryCreate(BaseModel):
    """Body for POST projects/{permalink}/repository."""

    repository: RepositoryFields


# ============================================
# Servers
# ============================================

class ServerCreate(BaseModel):
    """Body for POST projects/{permalink}/servers.

    The server definition is forwarded untouched.
    """

    server: Any


# ============================================
# Commands
# ============================================

class CommandFields(BaseModel):
    description: Any
    command: Any
    cback: Any
    timing: Any
    halt_on_error: Any
    server_identifiers: Any
    all_servers: Optional[bool] = None


class CommandCreate(BaseModel):
    """Body for POST projects/{permalink}/commands."""

    command: CommandFields


# ============================================
# Deployments
# ============================================

class DeploymentFields(BaseModel):
    parent_identifier: str
    start_revision: Revision = ""
    end_revision: Revision = ""
    mode: Literal["queue", "preview"] = "queue"
    copy_config_files: int = Field(default=1, ge=0, le=1)
    email_notify: int = Field(default=1, ge=0, le=1)


class DeploymentCreate(BaseModel):
    """Body for POST projects/{permalink}/deployments."""

    deployment: DeploymentFields


def serialize(payload: BaseModel) -> str:
    """Compact JSON with only the fields that were explicitly set."""
    return payload.model_dump_json(exclude_unset=True)
