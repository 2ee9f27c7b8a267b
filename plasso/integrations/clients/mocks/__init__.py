"""
Mock integration clients.

These clients return fake (but realistic) responses without calling Plasso.
They follow the SAME MemberClient interface as the real HTTP clients and
return data shaped according to plasso/integrations/contracts/*.
"""
