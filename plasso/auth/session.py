"""
Cookie-based member sessions for FastAPI apps.

A session is looked up in this order:
1. `logout` query parameter -> logged-out session (redirects to the space's logout URL)
2. the session cookie (base64 JSON: {"token": ..., "logout_url": ...})
3. `token` query parameter -> validated through BillingClient.new_session

Usage:
    guard = SessionGuard()

    @app.get("/members")
    def members_only(session: MemberSession = Depends(guard.protect)):
        ...
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Optional, Tuple

import httpx
from fastapi import HTTPException, Request, Response, status

from plasso.integrations.clients.real_http.billing import BillingClient
from plasso.integrations.contracts.interfaces import MemberSession, SessionSpace
from plasso.integrations.policy.response_wrappers import PlassoAPIError, PlassoResponseError

logger = logging.getLogger(__name__)

TOKEN_PARAM = "token"
LOGOUT_PARAM = "logout"


def encode_cookie(session: MemberSession) -> str:
    raw = json.dumps(session.to_cookie(), separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_cookie(value: str) -> Optional[MemberSession]:
    """Return the session stored in a cookie value, or None if it is unreadable."""
    padded = value + "=" * (-len(value) % 4)
    try:
        data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
    except (binascii.Error, UnicodeError, ValueError):
        logger.debug("Ignoring malformed session cookie")
        return None
    if not isinstance(data, dict) or not data.get("token"):
        return None
    return MemberSession(
        logged_in=True,
        token=str(data["token"]),
        space=SessionSpace(logout_url=str(data.get("logout_url") or "")),
    )


class SessionGuard:
    def __init__(
        self,
        billing_client: Optional[BillingClient] = None,
        cookie_name: Optional[str] = None,
    ) -> None:
        self.billing_client = billing_client or BillingClient()
        self.cookie_name = cookie_name or self.billing_client.config.cookie_name

    def _resolve(self, request: Request) -> Tuple[Optional[MemberSession], bool]:
        """Return (session, came_from_token_param)."""
        cookie = request.cookies.get(self.cookie_name)
        stored = decode_cookie(cookie) if cookie else None

        if LOGOUT_PARAM in request.query_params:
            logout_url = stored.space.logout_url if stored else ""
            return MemberSession.logged_out(logout_url), False

        if stored is not None:
            return stored, False

        token = request.query_params.get(TOKEN_PARAM)
        if token:
            return self.billing_client.new_session(token), True

        return None, False

    def from_request(self, request: Request) -> Optional[MemberSession]:
        """
        Look up the member session for a request.

        Returns None when the request carries neither a cookie nor a token.

        Raises:
            PlassoAPIError, PlassoResponseError, httpx.HTTPError: when a
                `token` parameter cannot be validated
        """
        session, _ = self._resolve(request)
        return session

    def to_response(self, response: Response, session: MemberSession) -> None:
        response.set_cookie(
            self.cookie_name,
            encode_cookie(session),
            httponly=True,
            samesite="lax",
            path="/",
        )

    def logout(self, response: Response) -> None:
        response.delete_cookie(self.cookie_name, path="/")

    def _redirect(self, location: str, *, clear_cookie: bool = False) -> HTTPException:
        headers = {"Location": location}
        if clear_cookie:
            cleared = Response()
            self.logout(cleared)
            headers["Set-Cookie"] = cleared.headers["set-cookie"]
        return HTTPException(status_code=status.HTTP_307_TEMPORARY_REDIRECT, headers=headers)

    def protect(self, request: Request, response: Response) -> MemberSession:
        """FastAPI dependency that only lets logged-in members through."""
        root = str(request.base_url)
        try:
            session, from_token = self._resolve(request)
        except (PlassoAPIError, PlassoResponseError, httpx.HTTPError) as exc:
            logger.warning("Session validation failed for %s: %s", request.url.path, exc)
            raise self._redirect(root) from exc

        if session is None:
            raise self._redirect(root)

        if not session.logged_in:
            raise self._redirect(session.space.logout_url or root, clear_cookie=True)

        if from_token:
            self.to_response(response, session)
        return session
