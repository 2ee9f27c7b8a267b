from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .flexkit import (
        CreditCardRequest,
        LoginRequest,
        MemberData,
        PaymentRequest,
        SettingsRequest,
        SubscriptionRequest,
    )


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class SessionSpace:
    logout_url: str = ""
    slug: str = ""


@dataclass
class MemberSession:
    """A billing session resolved from a member token."""
    logged_in: bool
    token: str
    id: str = ""
    plan_id: int = 0
    space: SessionSpace = field(default_factory=SessionSpace)

    @classmethod
    def logged_out(cls, logout_url: str = "") -> "MemberSession":
        return cls(logged_in=False, token="", space=SessionSpace(logout_url=logout_url))

    def to_cookie(self) -> Dict[str, Any]:
        return {"token": self.token, "logout_url": self.space.logout_url}


@dataclass
class Member:
    """
    A handle to an authenticated member.

    The token changes after every login. After delete() or logout() the
    handle is closed and a new one must be obtained.
    """
    public_key: str
    token: str
    client: Optional["MemberClient"] = field(default=None, repr=False, compare=False)
    closed: bool = field(default=False, compare=False)

    def _bound_client(self) -> "MemberClient":
        if self.closed:
            raise ValueError("Member handle is closed; log in again to obtain a new one.")
        if self.client is None:
            raise ValueError("Member handle is not bound to a client.")
        return self.client

    def get_data(self) -> "MemberData":
        return self._bound_client().get_data(self)

    def update_settings(self, request: "SettingsRequest") -> None:
        self._bound_client().update_settings(self, request)

    def update_credit_card(self, request: "CreditCardRequest") -> None:
        self._bound_client().update_credit_card(self, request)

    def delete(self) -> None:
        self._bound_client().delete(self)
        self.closed = True

    def logout(self) -> None:
        self._bound_client().logout(self)
        self.closed = True


# ---------------------------------------------------------------------------
# Abstract client interface
# ---------------------------------------------------------------------------

class MemberClient(ABC):
    """Every Flexkit client (real or mock) must implement this interface."""

    # -- Authentication --

    @abstractmethod
    def login(self, request: "LoginRequest") -> Member:
        """Authenticate a customer and return a bound Member handle."""

    # -- Purchases --

    @abstractmethod
    def create_payment(self, request: "PaymentRequest") -> None:
        """Create a one-off payment for a list of products."""

    @abstractmethod
    def create_subscription(self, request: "SubscriptionRequest") -> Member:
        """Subscribe a new customer to a plan and return their Member handle."""

    # -- Member operations --

    @abstractmethod
    def get_data(self, member: Member) -> "MemberData":
        """Fetch profile, data items and plans for a member."""

    @abstractmethod
    def update_settings(self, member: Member, request: "SettingsRequest") -> None:
        """Change a member's contact and shipping settings."""

    @abstractmethod
    def update_credit_card(self, member: Member, request: "CreditCardRequest") -> None:
        """Change a member's payment source (and optionally plan)."""

    @abstractmethod
    def delete(self, member: Member) -> None:
        """Delete the member."""

    @abstractmethod
    def logout(self, member: Member) -> None:
        """Invalidate the member's token."""
