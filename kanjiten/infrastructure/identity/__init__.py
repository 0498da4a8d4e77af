"""
Identity bounded context - Infrastructure layer.

Tokens are issued by the external identity provider; this layer only
verifies them and exposes the verified user to the routers.
"""
