"""
Billing session contracts.

GraphQL request/response shapes used to resolve a member token into a
MemberSession (member id, plan id, and the space's logout URL).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .interfaces import MemberSession, SessionSpace

SESSION_QUERY = "query($token: String!){member(token: $token){id,planId,space{logoutUrl}}}"


class GraphQLQuery(BaseModel):
    query: str
    variables: Dict[str, str] = Field(default_factory=dict)


class SpaceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    slug: str = ""
    logout_url: str = Field(default="", alias="logoutUrl")


class SessionMemberModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    plan_id: int = Field(default=0, alias="planId")
    space: SpaceModel = Field(default_factory=SpaceModel)

    def to_session(self, token: str) -> MemberSession:
        return MemberSession(
            logged_in=True,
            token=token,
            id=self.id,
            plan_id=self.plan_id,
            space=SessionSpace(logout_url=self.space.logout_url, slug=self.space.slug),
        )


class GraphQLResponse(BaseModel):
    """Envelope of any GraphQL reply: {"data": {...}, "errors": [...]}"""

    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = Field(default_factory=list)
