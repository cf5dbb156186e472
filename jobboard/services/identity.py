# jobboard/services/identity.py
import logging

import httpx

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """Raised when the identity provider rejects the token or is unreachable."""


class GoogleIdentityProvider:
    """Exchanges a Google OAuth access token for the user's profile claims."""

    def __init__(self, app=None):
        self.userinfo_url = "https://www.googleapis.com/oauth2/v3/userinfo"
        self.timeout = 10.0
        self.transport = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.userinfo_url = app.config.get("GOOGLE_USERINFO_URL", self.userinfo_url)
        self.timeout = app.config.get("IDENTITY_TIMEOUT", self.timeout)
        app.extensions["identity_provider"] = self

    def fetch_profile(self, access_token):
        """
        Returns a dict with name, email, picture and sub (the Google user id).
        """
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(
                    self.userinfo_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise IdentityError(str(e)) from e
        except ValueError as e:
            raise IdentityError("Identity provider returned a malformed profile") from e

        if not data.get("sub") or not data.get("email"):
            raise IdentityError("Identity provider returned an incomplete profile")

        return {
            "name": data.get("name") or data["email"].split("@")[0],
            "email": data["email"],
            "picture": data.get("picture"),
            "sub": data["sub"],
        }
