from __future__ import annotations

from typing import Any, Dict, Optional

import httpx


class ProviderError(RuntimeError):
    """Raised when a news provider request fails or returns an unusable body."""

    def __init__(self, provider: str, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.detail = message
        self.status_code = status_code


def read_json_object(response: httpx.Response, provider: str) -> Dict[str, Any]:
    if not response.is_success:
        raise ProviderError(provider, f"HTTP {response.status_code}", status_code=response.status_code)
    try:
        data = response.json()
    except ValueError as exc:
        raise ProviderError(provider, f"invalid JSON body: {exc}") from exc
    if not isinstance(data, dict):
        raise ProviderError(provider, f"unexpected body type {type(data).__name__}")
    return data
