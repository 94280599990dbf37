"""
Cookie Preference Storage Adapter.

Implements PreferenceStoragePort over HTTP cookies: the server-side
stand-in for the browser's local storage. Reads come from the incoming
request's cookies; writes are remembered and applied to the outgoing
response as Set-Cookie headers.

Invariants:
- get_item() after set_item() in the same request returns the new value
- apply() only emits cookies that were written during this request
"""

from __future__ import annotations

from collections.abc import Mapping

from starlette.responses import Response

ONE_YEAR_SECONDS = 365 * 24 * 60 * 60


class CookiePreferenceStorage:
    """Request-scoped PreferenceStoragePort backed by cookies."""

    def __init__(
        self,
        cookies: Mapping[str, str],
        *,
        max_age: int = ONE_YEAR_SECONDS,
        path: str = "/",
        secure: bool = False,
    ) -> None:
        self._cookies: dict[str, str] = dict(cookies)
        self._pending: dict[str, str] = {}
        self.max_age = max_age
        self.path = path
        self.secure = secure

    @property
    def pending(self) -> dict[str, str]:
        """Cookies written during this request, not yet sent."""
        return dict(self._pending)

    def get_item(self, key: str) -> str | None:
        return self._cookies.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._cookies[key] = value
        self._pending[key] = value

    def apply(self, response: Response) -> Response:
        """Write pending cookies onto the response."""
        for key, value in self._pending.items():
            response.set_cookie(
                key,
                value,
                max_age=self.max_age,
                path=self.path,
                secure=self.secure,
                httponly=False,  # read by the page script
                samesite="lax",
            )
        return response
