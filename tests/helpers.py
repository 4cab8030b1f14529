"""Shared test doubles."""

from datetime import date
from typing import List

from focos_api.domain.models import FocusRecord, FocusStoreError


def rec(day: str, estado: str, bioma: str, focos: int) -> FocusRecord:
    return FocusRecord(day=date.fromisoformat(day), estado=estado, bioma=bioma, focos=focos)


class MemoryStore:
    def __init__(self, records: List[FocusRecord]):
        self._records = records

    def records(self) -> List[FocusRecord]:
        return self._records


class BrokenStore:
    def records(self) -> List[FocusRecord]:
        raise FocusStoreError("focos.json: expected a JSON list")


def fake_aiohttp_session(status=200, body=b"{}", headers=None, error=None, calls=None):
    """Return a class that replaces aiohttp.ClientSession.

    Every get() is appended to `calls` as (url, kwargs). If `error` is set it
    is raised from get() instead of returning a response.
    """

    class FakeResponse:
        def __init__(self):
            self.status = status
            self.headers = headers or {"Content-Type": "application/json"}

        async def read(self):
            return body

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def get(self, url, **kwargs):
            if calls is not None:
                calls.append((url, kwargs))
            if error is not None:
                raise error
            return FakeResponse()

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession
