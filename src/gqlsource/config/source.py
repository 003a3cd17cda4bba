"""Remote GraphQL source configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_TYPE_PREFIX = "Wp"
SOURCE_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True, slots=True)
class SourceConfig:
    """Where the content lives and how local node types are named."""

    url: str
    resilience: ResilienceConfig
    type_prefix: str = DEFAULT_TYPE_PREFIX


def get_source_config(*, resilience: ResilienceConfig | None = None) -> SourceConfig:
    url = require_env_vars(("GQLSOURCE_URL",))["GQLSOURCE_URL"].strip()
    token = optional_env_var("GQLSOURCE_AUTH_TOKEN")
    headers = {"Content-Type": "application/json"}
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"

    return SourceConfig(
        url=url,
        type_prefix=optional_env_var("GQLSOURCE_TYPE_PREFIX") or DEFAULT_TYPE_PREFIX,
        resilience=resilience
        or ResilienceConfig(
            name="graphql",
            base_url=url,
            timeout_seconds=SOURCE_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=4),
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers=headers,
        ),
    )
