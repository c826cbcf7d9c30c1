import os
from typing import Annotated

from fastapi import Header, HTTPException


def require_client(
    x_api_key: Annotated[str | None, Header(alias="x-api-key")] = None,
    x_admin_token: Annotated[str | None, Header(alias="x-admin-token")] = None,
) -> None:
    """
    Client/API guard. Accepts either:
      - X-Admin-Token that matches ADMIN_TOKEN (admins always allowed), or
      - X-Api-Key that matches CAPTCHA_API_KEY.
    """
    admin_token = os.getenv("ADMIN_TOKEN", "")
    api_key = os.getenv("CAPTCHA_API_KEY", "")

    # Admin token grants access
    if admin_token and x_admin_token == admin_token:
        return

    # Otherwise require the API key
    if not api_key:
        raise HTTPException(status_code=500, detail="CAPTCHA_API_KEY not configured on server.")
    if x_api_key != api_key:
        raise HTTPException(status_code=401, detail="Unauthorized.")
