"""
Plasso integration clients.

- real_http/: talks to the Plasso REST and GraphQL endpoints over httpx
- mocks/: in-memory clients with the same interface, no network calls
"""
