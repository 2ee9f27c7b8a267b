"""
Mock Flexkit Client.

Purpose:
- In-memory stand-in for FlexkitClient used in development and tests
- Does NOT make any network calls
- Keeps members keyed by email; tokens are re-issued on every login

Behavior:
- login(...) fails with PlassoAPIError(401) for an unknown email or wrong password
- operations on an unknown or revoked token fail with PlassoAPIError(401)
- payments are appended to `payments` so tests can inspect them
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from plasso.integrations.contracts.flexkit import (
    CreditCardRequest,
    LoginRequest,
    MemberData,
    PaymentRequest,
    SettingsRequest,
    SubscriptionRequest,
)
from plasso.integrations.contracts.interfaces import Member, MemberClient
from plasso.integrations.policy.response_wrappers import PlassoAPIError

logger = logging.getLogger(__name__)

MOCK_DOMAIN = "mock://plasso"


@dataclass
class _MockAccount:
    password: str
    data: MemberData
    credit_card: Optional[CreditCardRequest] = None
    tokens: List[str] = field(default_factory=list)


class MockFlexkitClient(MemberClient):
    def __init__(self) -> None:
        self.accounts: Dict[str, _MockAccount] = {}
        self.payments: List[PaymentRequest] = []

    def _issue_token(self, account: _MockAccount) -> str:
        token = f"mock-{uuid.uuid4().hex}"
        account.tokens.append(token)
        return token

    def _account_for(self, member: Member, method: str, path: str) -> _MockAccount:
        for account in self.accounts.values():
            if member.token in account.tokens:
                return account
        raise PlassoAPIError(method, 401, f"{MOCK_DOMAIN}{path}", b'{"error":"invalid token"}')

    def login(self, request: LoginRequest) -> Member:
        account = self.accounts.get(request.email)
        if account is None or account.password != request.password:
            raise PlassoAPIError("POST", 401, f"{MOCK_DOMAIN}/api/service/login", b'{"error":"invalid login"}')
        logger.info("[MOCK] Login for %s", request.email)
        return Member(public_key=request.public_key, token=self._issue_token(account), client=self)

    def create_payment(self, request: PaymentRequest) -> None:
        if not request.products:
            raise PlassoAPIError("POST", 400, f"{MOCK_DOMAIN}/api/payments", b'{"error":"no products"}')
        logger.info("[MOCK] Payment for %d product(s)", len(request.products))
        self.payments.append(request)

    def create_subscription(self, request: SubscriptionRequest) -> Member:
        if request.email in self.accounts:
            raise PlassoAPIError("POST", 409, f"{MOCK_DOMAIN}/api/subscriptions", b'{"error":"email taken"}')
        billing = request.model_dump(include={
            "billing_address", "billing_city", "billing_state", "billing_zip", "billing_country",
            "shipping_name", "shipping_address", "shipping_city", "shipping_state", "shipping_zip",
            "shipping_country", "shipping_options",
        })
        account = _MockAccount(
            password=request.password,
            data=MemberData(
                id=uuid.uuid4().hex,
                email=request.email,
                name=request.name,
                data_fields=list(request.data_fields),
                plans=[request.plan] if request.plan else [],
                **billing,
            ),
        )
        self.accounts[request.email] = account
        logger.info("[MOCK] Subscription to plan %s for %s", request.plan, request.email)
        return Member(public_key=request.public_key, token=self._issue_token(account), client=self)

    def get_data(self, member: Member) -> MemberData:
        return self._account_for(member, "POST", "/graphql").data.model_copy(deep=True)

    def update_settings(self, member: Member, request: SettingsRequest) -> None:
        account = self._account_for(member, "POST", "/api/services/user?action=settings")
        changes = {k: v for k, v in request.model_dump().items() if v}
        old_email = account.data.email
        new_email = changes.get("email")
        if new_email and new_email != old_email and new_email in self.accounts:
            raise PlassoAPIError(
                "POST", 409, f"{MOCK_DOMAIN}/api/services/user?action=settings", b'{"error":"email taken"}'
            )
        account.data = account.data.model_copy(update=changes)
        if account.data.email != old_email:
            self.accounts[account.data.email] = self.accounts.pop(old_email)

    def update_credit_card(self, member: Member, request: CreditCardRequest) -> None:
        account = self._account_for(member, "POST", "/api/services/user?action=cc")
        account.credit_card = request
        if request.plan_id:
            account.data = account.data.model_copy(update={"plans": [str(request.plan_id)]})

    def delete(self, member: Member) -> None:
        account = self._account_for(member, "DELETE", "/api/service/user")
        del self.accounts[account.data.email]

    def logout(self, member: Member) -> None:
        account = self._account_for(member, "POST", "/api/service/logout")
        account.tokens.remove(member.token)
