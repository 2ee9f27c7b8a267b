"""
Real HTTP integration clients.

These clients communicate with the Plasso platform:
- Flexkit REST endpoints (login, payments, subscriptions, member settings)
- The GraphQL API (member data and billing sessions)

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to plasso/integrations/contracts/*
- All HTTP goes through transport.send_request
"""
