#deployhq_client\core\factory.py
from deployhq_client.core.models import (
    ClientConfig,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_SERVICE_HOST,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from deployhq_client.core.validation import validate_client_config, validate_subdomain


class ClientConfigFactory:
    @staticmethod
    def build_base_url(subdomain: str, service_host: str = DEFAULT_SERVICE_HOST) -> str:
        validate_subdomain(subdomain)
        return f"https://{subdomain.strip()}.{service_host.strip('./')}/"

    @staticmethod
    def create(
        *,
        subdomain: str,
        username: str,
        api_key: str,
        service_host: str = DEFAULT_SERVICE_HOST,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> ClientConfig:
        config = ClientConfig(
            base_url=ClientConfigFactory.build_base_url(subdomain, service_host),
            username=username,
            api_key=api_key,
            content_type=content_type,
            timeout=timeout,
            user_agent=user_agent,
        )

        validate_client_config(config)
        return config
