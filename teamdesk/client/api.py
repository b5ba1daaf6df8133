"""
Async HTTP client for the teams API.

Every mutating call returns the decoded JSON body on success and raises
``TeamsApiError`` otherwise: transport failures, non-2xx responses, bodies that
are not JSON and bodies whose ``success`` flag is not true all count as failure.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

Team = Dict[str, Any]


class TeamsApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TeamsApi:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> "TeamsApi":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            r = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TeamsApiError(f"{method} {url} failed: {e}") from e

        try:
            data = r.json()
        except ValueError:
            data = None

        if r.is_error:
            detail = data.get("detail") if isinstance(data, dict) else None
            raise TeamsApiError(detail or f"{method} {url} returned {r.status_code}", r.status_code)
        if data is None:
            raise TeamsApiError(f"{method} {url} returned a non-JSON body", r.status_code)
        return data

    async def _mutate(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        data = await self._request(method, url, **kwargs)
        if not isinstance(data, dict) or data.get("success") is not True:
            error = data.get("error") if isinstance(data, dict) else None
            raise TeamsApiError(error or f"{method} {url} was not successful")
        return data

    async def get_all(self, search: Optional[str] = None) -> List[Team]:
        params = {"search": search} if search else None
        return await self._request("GET", "/teams", params=params)

    async def get_by_id(self, team_id: str) -> Team:
        return await self._request("GET", f"/teams/{team_id}")

    async def create(self, team: Team) -> Dict[str, Any]:
        return await self._mutate("POST", "/teams", json=team)

    async def update(self, team_id: str, team: Team) -> Dict[str, Any]:
        return await self._mutate("PUT", f"/teams/{team_id}", json=team)

    async def delete(self, team_id: str) -> Dict[str, Any]:
        return await self._mutate("DELETE", f"/teams/{team_id}")

    async def bulk_delete(self, ids: List[str]) -> Dict[str, Any]:
        return await self._mutate("POST", "/teams/bulk-delete", json={"ids": ids})

    async def update_status(self, team_id: str, field: str, status: str) -> Dict[str, Any]:
        return await self._mutate(
            "PATCH", f"/teams/{team_id}/status", json={"field": field, "status": status}
        )

    async def delete_member(self, team_id: str, member_id: str) -> Dict[str, Any]:
        return await self._mutate("DELETE", f"/teams/{team_id}/members/{member_id}")

    async def update_member(self, team_id: str, member_id: str, name: str) -> Dict[str, Any]:
        return await self._mutate(
            "PATCH", f"/teams/{team_id}/members/{member_id}", json={"name": name}
        )

    async def reorder(self, teams: List[Team]) -> Dict[str, Any]:
        return await self._mutate("POST", "/teams/reorder", json={"teams": teams})
