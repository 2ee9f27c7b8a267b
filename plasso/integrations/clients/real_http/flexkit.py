"""
Real Flexkit HTTP Client.

Purpose:
- Authenticates customers and returns Member handles
- Creates payments and plan subscriptions
- Reads and updates member data (settings, credit card), deletes and logs out members

Usage:
    client = FlexkitClient()
    member = client.login(LoginRequest(public_key="pk", email="a@b.c", password="pw"))
    data = member.get_data()
    member.update_settings(SettingsRequest(name="New Name"))
    member.logout()
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from plasso.config import PlassoConfig, load_plasso_config
from plasso.integrations.clients.real_http.transport import send_request
from plasso.integrations.contracts.billing import GraphQLQuery
from plasso.integrations.contracts.flexkit import (
    MEMBER_DATA_QUERY,
    CreditCardRequest,
    LoginRequest,
    MemberData,
    PaymentRequest,
    SettingsRequest,
    SubscriptionRequest,
)
from plasso.integrations.contracts.interfaces import Member, MemberClient
from plasso.integrations.policy.response_wrappers import (
    normalize_member_data_response,
    normalize_token_response,
)

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/service/login"
LOGOUT_PATH = "/api/service/logout"
USER_PATH = "/api/service/user"
SETTINGS_PATH = "/api/services/user?action=settings"
CREDIT_CARD_PATH = "/api/services/user?action=cc"
PAYMENTS_PATH = "/api/payments"
SUBSCRIPTIONS_PATH = "/api/subscriptions"
GRAPHQL_PATH = "/graphql"


class FlexkitClient(MemberClient):
    def __init__(
        self,
        config: Optional[PlassoConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or load_plasso_config()
        self.base_url = self.config.domain.rstrip("/")
        self.timeout_seconds = self.config.flexkit_timeout_seconds
        self.http_client = http_client

    def _send(self, method: str, path: str, payload: Any) -> bytes:
        return send_request(
            method,
            path,
            payload,
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            client=self.http_client,
        )

    def login(self, request: LoginRequest) -> Member:
        body = self._send("POST", LOGIN_PATH, request.to_payload())
        token = normalize_token_response(body)
        logger.info("Member logged in for public key %s", request.public_key)
        return Member(public_key=request.public_key, token=token, client=self)

    def create_payment(self, request: PaymentRequest) -> None:
        self._send("POST", PAYMENTS_PATH, request.to_payload())
        logger.info("Payment created for %d product(s)", len(request.products))

    def create_subscription(self, request: SubscriptionRequest) -> Member:
        payload: Dict[str, Any] = request.to_payload()
        payload["subscription_for"] = "space"
        body = self._send("POST", SUBSCRIPTIONS_PATH, payload)
        token = normalize_token_response(body)
        logger.info("Subscription created for plan %s", request.plan)
        return Member(public_key=request.public_key, token=token, client=self)

    def get_data(self, member: Member) -> MemberData:
        query = GraphQLQuery(query=MEMBER_DATA_QUERY, variables={"token": member.token})
        body = self._send("POST", GRAPHQL_PATH, query.model_dump())
        return normalize_member_data_response(body)

    def update_settings(self, member: Member, request: SettingsRequest) -> None:
        payload: Dict[str, Any] = request.to_payload()
        payload["pltoken"] = member.token
        self._send("POST", SETTINGS_PATH, payload)

    def update_credit_card(self, member: Member, request: CreditCardRequest) -> None:
        payload: Dict[str, Any] = request.to_payload()
        payload["pltoken"] = member.token
        self._send("POST", CREDIT_CARD_PATH, payload)

    def delete(self, member: Member) -> None:
        self._send("DELETE", USER_PATH, {"token": member.token})
        logger.info("Member deleted")

    def logout(self, member: Member) -> None:
        self._send("POST", LOGOUT_PATH, {"token": member.token})
        logger.info("Member logged out")


_default_client: Optional[FlexkitClient] = None


def get_default_client() -> FlexkitClient:
    global _default_client
    if _default_client is None:
        _default_client = FlexkitClient()
    return _default_client


def login(request: LoginRequest) -> Member:
    """Authenticate with the default client."""
    return get_default_client().login(request)


def create_payment(request: PaymentRequest) -> None:
    get_default_client().create_payment(request)


def create_subscription(request: SubscriptionRequest) -> Member:
    return get_default_client().create_subscription(request)
