"""
Integrations layer.

This package contains all code used to communicate with the Plasso platform:
- Flexkit REST endpoints (members, payments, subscriptions)
- The GraphQL API (member data, billing sessions)

Key rule:
- Callers build requests from the contracts, never from raw dicts.
- Real clients live under clients/real_http, mocks under clients/mocks;
  both implement contracts.interfaces.MemberClient.
"""

from .contracts.billing import GraphQLQuery, GraphQLResponse
from .contracts.flexkit import (
    CreditCardRequest,
    DataItem,
    LoginRequest,
    MemberData,
    PaymentRequest,
    Product,
    SettingsRequest,
    SubscriptionRequest,
    TokenResponse,
)
from .contracts.interfaces import Member, MemberClient, MemberSession, SessionSpace
from .policy.response_wrappers import PlassoAPIError, PlassoResponseError
from .clients.real_http.flexkit import FlexkitClient, create_payment, create_subscription, login
from .clients.real_http.billing import BillingClient
from .clients.mocks.flexkit import MockFlexkitClient

__all__ = [
    # contracts
    "CreditCardRequest", "DataItem", "LoginRequest", "MemberData",
    "PaymentRequest", "Product", "SettingsRequest", "SubscriptionRequest",
    "TokenResponse", "GraphQLQuery", "GraphQLResponse",
    "Member", "MemberClient", "MemberSession", "SessionSpace",
    # errors
    "PlassoAPIError", "PlassoResponseError",
    # clients
    "FlexkitClient", "BillingClient", "MockFlexkitClient",
    "login", "create_payment", "create_subscription",
]
