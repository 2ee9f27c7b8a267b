from __future__ import annotations

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError

from plasso.integrations.contracts.billing import GraphQLResponse, SessionMemberModel
from plasso.integrations.contracts.flexkit import MemberData, TokenResponse
from plasso.integrations.contracts.interfaces import MemberSession


class PlassoAPIError(Exception):
    """A non-2xx reply. The message reads "<METHOD> <STATUS> <URL> <BODY>"."""

    def __init__(self, method: str, status_code: int, url: str, body: bytes = b"") -> None:
        self.method = method
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"{method} {status_code} {url} {self.text}")

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class PlassoResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


def normalize_token_response(body: bytes) -> str:
    """Return the member token from a login or subscription reply."""
    raw = _decode_json(body)
    model = _build_model(TokenResponse, raw)
    return model.token


def normalize_member_data_response(body: bytes) -> MemberData:
    member = _graphql_member(body)
    return _build_model(MemberData, member)


def normalize_session_response(body: bytes, *, token: str) -> MemberSession:
    member = _graphql_member(body)
    return _build_model(SessionMemberModel, member).to_session(token)


def _graphql_member(body: bytes) -> Dict[str, Any]:
    raw = _decode_json(body)
    envelope = _build_model(GraphQLResponse, raw)
    if envelope.errors:
        messages = "; ".join(str(e.get("message", e)) for e in envelope.errors)
        raise PlassoResponseError(f"GraphQL errors: {messages}", payload=raw)

    member = (envelope.data or {}).get("member")
    if not isinstance(member, dict):
        raise PlassoResponseError("GraphQL reply has no member.", payload=raw)
    return member


def _decode_json(body: bytes) -> Any:
    try:
        raw = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise PlassoResponseError(f"Response is not valid JSON: {body[:200]!r}") from exc
    if not isinstance(raw, dict):
        raise PlassoResponseError("Response JSON is not an object.", payload=raw)
    return raw


def _build_model(model_type: type[BaseModel], raw: Dict[str, Any]):
    try:
        return model_type.model_validate(raw)
    except ValidationError as exc:
        raise PlassoResponseError(f"Response validation failed: {exc}", payload=raw) from exc
