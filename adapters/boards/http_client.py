from __future__ import annotations

import httpx


def create_http_client(
    *,
    base_url: str,
    api_token: str,
    timeout_seconds: float = 10.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    return httpx.Client(
        base_url=base_url,
        headers={
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
        },
        timeout=timeout_seconds,
        transport=transport,
    )
