"""Google OAuth 2.0 client for the authorization code flow."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlencode

import httpx

from cookease.domain.users import GoogleProfile
from cookease.services.errors import GoogleAuthFailed

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"


class GoogleOAuthClient(Protocol):
    """Interface for the Google side of the OAuth flow."""

    def authorization_url(self, state: str) -> str:
        """Return the consent page URL to redirect the browser to."""

    async def fetch_profile(self, code: str) -> GoogleProfile:
        """Exchange an authorization code for the user's Google profile."""


@dataclass
class HttpxGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth client implemented with httpx."""

    client_id: str
    client_secret: str
    redirect_uri: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, client_id: str, client_secret: str, redirect_uri: str
    ) -> "HttpxGoogleOAuthClient":
        """Create a Google OAuth client with a managed httpx session."""
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
            http_client=httpx.AsyncClient(),
        )

    def authorization_url(self, state: str) -> str:
        """Build the consent URL requesting profile and email scopes."""
        query = urlencode(
            {
                "client_id": self.client_id,
                "redirect_uri": self.redirect_uri,
                "response_type": "code",
                "scope": "openid email profile",
                "state": state,
            }
        )
        return f"{GOOGLE_AUTH_URL}?{query}"

    async def fetch_profile(self, code: str) -> GoogleProfile:
        """Exchange the code for an access token and read the userinfo."""
        token_response = await self.http_client.post(
            GOOGLE_TOKEN_URL,
            data={
                "code": code,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uri": self.redirect_uri,
                "grant_type": "authorization_code",
            },
            timeout=10,
        )
        token_response.raise_for_status()
        access_token = token_response.json().get("access_token")
        if not access_token:
            raise GoogleAuthFailed("Google did not return an access token")

        userinfo_response = await self.http_client.get(
            GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=10,
        )
        userinfo_response.raise_for_status()
        userinfo = userinfo_response.json()
        if not userinfo.get("sub") or not userinfo.get("email"):
            raise GoogleAuthFailed("Google profile is missing an id or email")
        return GoogleProfile(
            external_id=str(userinfo["sub"]),
            email=str(userinfo["email"]),
            display_name=userinfo.get("name"),
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
