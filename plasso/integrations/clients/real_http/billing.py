"""
Real Billing HTTP Client.

Purpose:
- Resolves a member token into a MemberSession through the Plasso GraphQL API
- Offers token-only forms of the member operations for callers that keep
  nothing but the token (e.g. a cookie)

The token always travels as a GraphQL variable; it is never spliced into
the query text.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from plasso.config import PlassoConfig, load_plasso_config
from plasso.integrations.clients.real_http.flexkit import FlexkitClient
from plasso.integrations.clients.real_http.transport import send_request
from plasso.integrations.contracts.billing import SESSION_QUERY, GraphQLQuery
from plasso.integrations.contracts.flexkit import CreditCardRequest, MemberData, SettingsRequest
from plasso.integrations.contracts.interfaces import Member, MemberClient, MemberSession
from plasso.integrations.policy.response_wrappers import normalize_session_response

logger = logging.getLogger(__name__)


class BillingClient:
    def __init__(
        self,
        config: Optional[PlassoConfig] = None,
        http_client: Optional[httpx.Client] = None,
        member_client: Optional[MemberClient] = None,
    ) -> None:
        self.config = config or load_plasso_config()
        self.graphql_url = self.config.graphql_url.rstrip("/")
        self.timeout_seconds = self.config.session_timeout_seconds
        self.http_client = http_client
        self.member_client = member_client or FlexkitClient(config=self.config, http_client=http_client)

    def new_session(self, token: str) -> MemberSession:
        query = GraphQLQuery(query=SESSION_QUERY, variables={"token": token})
        body = send_request(
            "POST",
            "",
            query.model_dump(),
            base_url=self.graphql_url,
            timeout=self.timeout_seconds,
            client=self.http_client,
        )
        session = normalize_session_response(body, token=token)
        logger.debug("Resolved session for member %s (plan %d)", session.id, session.plan_id)
        return session

    def _member(self, token: str) -> Member:
        return Member(public_key="", token=token, client=self.member_client)

    def get_data(self, token: str) -> MemberData:
        return self._member(token).get_data()

    def update_settings(self, token: str, request: SettingsRequest) -> None:
        self._member(token).update_settings(request)

    def update_credit_card(self, token: str, request: CreditCardRequest) -> None:
        self._member(token).update_credit_card(request)

    def delete(self, token: str) -> None:
        self._member(token).delete()

    def logout(self, token: str) -> None:
        self._member(token).logout()
