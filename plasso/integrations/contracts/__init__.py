"""
Contracts (data models).

This folder defines the request/response shapes for the Plasso platform:
- Flexkit REST request bodies (login, payments, subscriptions, settings, credit card)
- GraphQL member queries and their replies
- The Member handle and the MemberSession resolved from a token

Both the mock and the real HTTP clients use these contracts, so callers
never build ad-hoc dicts for the wire.
"""
