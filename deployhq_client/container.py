#deployhq_client\container.py

"""Wires settings into a ready-to-use client."""

from typing import Optional

import requests

from deployhq_client.client import DeployHQClient
from deployhq_client.config import ClientSettings
from deployhq_client.core.factory import ClientConfigFactory
from deployhq_client.transport.executor import RequestExecutor


def build_client(
    settings: Optional[ClientSettings] = None,
    session: Optional[requests.Session] = None,
) -> DeployHQClient:
    """Build a DeployHQClient, reading DEPLOYHQ_* variables when no settings are given."""
    settings = settings or ClientSettings()

    # ============================================
    # CONFIG
    # ============================================

    config = ClientConfigFactory.create(
        subdomain=settings.subdomain,
        username=settings.username,
        api_key=settings.api_key,
        service_host=settings.service_host,
        timeout=settings.timeout_seconds,
        user_agent=settings.user_agent,
    )

    # ============================================
    # EXECUTOR / FACADE
    # ============================================

    executor = RequestExecutor(config, session=session)
    return DeployHQClient(executor)
