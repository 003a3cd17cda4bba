from __future__ import annotations

import asyncio

import httpx

from gqlsource.adapters.http_resilience import (
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
    build_retry,
)


def test_build_retry_allows_post() -> None:
    retry = build_retry(RetryPolicy(total=2))

    assert retry.total == 2
    assert "POST" in {str(method).upper() for method in retry.allowed_methods}


def test_resilient_client_retries_server_errors() -> None:
    attempts: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(1)
        if len(attempts) < 2:
            return httpx.Response(503)
        assert request.headers["Authorization"] == "Bearer token"
        return httpx.Response(200, json={"data": {}})

    config = ResilienceConfig(
        name="test",
        base_url="https://cms.test",
        retry=RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0),
        ratelimit=RateLimit(max_calls=100, per_seconds=1.0),
        default_headers={"Authorization": "Bearer token"},
    )

    async def run() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.post("/graphql", json={"query": "{ __typename }"})

    response = asyncio.run(run())

    assert response.status_code == 200
    assert len(attempts) == 2
