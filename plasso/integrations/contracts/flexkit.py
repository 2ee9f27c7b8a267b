"""
Flexkit contracts.

Request/response shapes for the Flexkit REST endpoints:
- /api/service/login, /api/service/logout, /api/service/user
- /api/services/user?action=settings and ?action=cc
- /api/payments and /api/subscriptions
- the member data GraphQL query

Field names are the platform's JSON keys and must not be renamed.
Fields the client fills in itself (pltoken, subscription_for) are not part
of these models; the client adds them when it builds the payload.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for request bodies; serialises by wire alias."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

class Product(WireModel):
    id: str = ""                # Plasso product id
    qty: str = ""
    amount: str = ""            # only for variable price products


class DataItem(WireModel):
    id: str = ""
    value: str = ""


class ShippingDetails(WireModel):
    """Shipping fields; which ones are required depends on the plan."""

    shipping_name: str = ""
    shipping_address: str = ""
    shipping_city: str = ""
    shipping_state: str = ""
    shipping_zip: str = ""
    shipping_country: str = ""
    shipping_options: str = ""


class BillingDetails(ShippingDetails):
    billing_address: str = ""
    billing_city: str = ""
    billing_state: str = ""
    billing_zip: str = ""
    billing_country: str = ""


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class LoginRequest(WireModel):
    public_key: str             # public key of the Plasso seller
    email: str
    password: str


class PaymentRequest(BillingDetails):
    public_key: str = ""
    token: str = ""             # token returned by the javascript flexkit GetToken call
    products: List[Product] = Field(default_factory=list)
    data_fields: List[DataItem] = Field(default_factory=list)
    coupon: str = ""
    email: str = ""
    name: str = ""


class SubscriptionRequest(BillingDetails):
    public_key: str = ""
    plan: str = ""              # plan id being subscribed to
    token: str = ""
    email: str = ""
    name: str = ""
    password: str = ""
    data_fields: List[DataItem] = Field(default_factory=list)


class CreditCardRequest(WireModel):
    last4: str = Field(default="", alias="cc_last_4")   # informational
    type: str = Field(default="", alias="cc_type")      # informational
    plan_id: int = Field(default=0, alias="plan")       # allows changing plan
    token: str = ""                                     # Stripe source token


class SettingsRequest(ShippingDetails):
    email: str = ""
    name: str = ""


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class TokenResponse(BaseModel):
    token: str


class MemberData(BaseModel):
    """Information about a member, as returned by the member data query."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str                     # unique and stable, unlike the token
    email: str = ""
    name: str = ""
    billing_address: str = ""
    billing_city: str = ""
    billing_state: str = ""
    billing_zip: str = ""
    billing_country: str = ""
    shipping_name: str = ""
    shipping_address: str = ""
    shipping_city: str = ""
    shipping_state: str = ""
    shipping_zip: str = ""
    shipping_country: str = ""
    shipping_options: str = ""
    data_fields: List[DataItem] = Field(default_factory=list)
    plans: List[str] = Field(default_factory=list)


MEMBER_DATA_QUERY = (
    "query($token: String!){member(token: $token){"
    "id,email,name,"
    "billingAddress,billingCity,billingState,billingZip,billingCountry,"
    "shippingName,shippingAddress,shippingCity,shippingState,shippingZip,"
    "shippingCountry,shippingOptions,"
    "dataFields{id,value},plans"
    "}}"
)
