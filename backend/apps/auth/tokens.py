from typing import Dict

from rest_framework_simplejwt.tokens import RefreshToken


def issue_tokens(user) -> Dict[str, str]:
    """Mint a refresh/access pair carrying ``email`` and ``name`` claims.

    Custom claims set on the refresh token are copied into the access token
    derived from it, next to ``user_id`` and ``jti``.
    """
    refresh = RefreshToken.for_user(user)
    refresh["email"] = user.email
    refresh["name"] = user.username
    return {"token": str(refresh.access_token), "refresh": str(refresh)}
