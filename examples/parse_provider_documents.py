import os
import sys

# Add src to path for running directly
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from coreason_oidc_messages import (
    ClaimsIdentity,
    DiscoveryDocument,
    DynamicClientRegistrationDocument,
    parse_json,
)

DISCOVERY = """
{
  "issuer": "https://auth.example.com/",
  "token_endpoint": "https://auth.example.com/oauth/token",
  "scopes_supported": ["openid", "profile"],
  "backchannel_logout_supported": "true",
  "mtls_endpoint_aliases": {"token_endpoint": "https://mtls.auth.example.com/oauth/token"}
}
"""

USERINFO = '{"sub": "auth0|123", "name": "Alice", "amr": ["pwd", "otp"], "email_verified": true}'


def main() -> None:
    """
    Demonstrates reading provider metadata, building an identity from userinfo claims and
    assembling a registration request.
    """
    print(">>> Discovery")
    discovery = DiscoveryDocument.from_text(DISCOVERY)
    print(f"issuer: {discovery.issuer}")
    print(f"scopes: {discovery.scopes_supported}")
    print(f"backchannel logout: {discovery.backchannel_logout_supported}")
    print(f"mTLS token endpoint: {discovery.mtls_endpoint_aliases.token_endpoint}")

    print(">>> Claims")
    identity = ClaimsIdentity.from_json(parse_json(USERINFO), discovery.issuer, authentication_type="oidc")
    for claim in identity.claims:
        print(f"{claim.type} = {claim.value} ({claim.issuer})")

    print(">>> Registration")
    request = DynamicClientRegistrationDocument(
        client_name="Example CLI",
        redirect_uris=["http://127.0.0.1:8400/callback"],
        grant_types=["authorization_code", "refresh_token"],
        **{"https://example.com/tenant": "acme"},
    )
    request.extensions["software_channel"] = "stable"
    print(request.to_json())


if __name__ == "__main__":
    main()
