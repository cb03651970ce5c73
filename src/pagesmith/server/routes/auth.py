"""Login, logout, and the session-protected admin panel"""

import html
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from pagesmith.auth.gate import AdminGate
from pagesmith.auth.passwords import check_credentials
from pagesmith.auth.tokens import SessionCodec
from pagesmith.config import AuthConfig
from pagesmith.crud.blobs import BlobStore
from pagesmith.crud.leads import lead_columns, list_leads
from pagesmith.server.deps import get_auth_config, get_codec, get_gate, get_leads_store
from pagesmith.server.errors import guarded, unauthorized


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/.netlify/functions", tags=["auth"])


class Credentials(BaseModel):
    username: str
    password: str


ADMIN_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Admin Panel</title>
  <style>
    body {{ font-family: Arial, sans-serif; background: #fff; margin: 0; padding: 20px; }}
    .container {{ max-width: 800px; margin: auto; }}
    table {{ border-collapse: collapse; width: 100%; }}
    th, td {{ border: 1px solid #ddd; padding: 6px; text-align: left; }}
    .logout {{ display: inline-block; margin-top: 20px; padding: 10px 20px; background-color: #4285F4; color: white; border: none; border-radius: 4px; cursor: pointer; }}
  </style>
</head>
<body>
  <div class="container">
    <h1>Welcome to the Admin Panel, {username}</h1>
    <p>This is a protected area.</p>
    <h2>Leads</h2>
    {leads}
    <button class="logout" onclick="logout()">Logout</button>
  </div>
  <script>
    function logout() {{
      fetch('/.netlify/functions/logout')
        .then(() => window.location.href = 'login.html')
        .catch(() => window.location.href = 'login.html');
    }}
  </script>
</body>
</html>
"""


def _cell(value: Any) -> str:
    return "" if value is None else html.escape(str(value))


def render_leads_table(leads: list[dict[str, Any]]) -> str:
    """HTML table over the union of fields seen across all leads."""
    if not leads:
        return "<p>No leads yet.</p>"
    columns = lead_columns(leads)
    head = "".join(f"<th>{_cell(c)}</th>" for c in columns)
    rows = "".join(
        "<tr>" + "".join(f"<td>{_cell(lead.get(c))}</td>" for c in columns) + "</tr>"
        for lead in leads
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{rows}</tbody></table>"


def render_admin_page(username: str, leads: list[dict[str, Any]]) -> str:
    return ADMIN_PAGE.format(username=html.escape(username), leads=render_leads_table(leads))


@router.post("/auth")
@guarded
def login(
    credentials: Credentials,
    config: AuthConfig = Depends(get_auth_config),
    codec: SessionCodec = Depends(get_codec),
    ):
    """Check the admin credentials and set a signed session cookie."""
    if not check_credentials(credentials.username, credentials.password, config):
        return unauthorized()
    response = JSONResponse({"message": "Authenticated successfully!"})
    response.headers["Set-Cookie"] = codec.session_cookie(codec.issue(credentials.username))
    logger.info("Admin %s logged in", credentials.username)
    return response


@router.api_route("/logout", methods=["GET", "POST"])
def logout(codec: SessionCodec = Depends(get_codec)):
    """Overwrite the session cookie with an expired placeholder."""
    response = JSONResponse({"message": "Logged out successfully"})
    response.headers["Set-Cookie"] = codec.clear_cookie()
    return response


@router.get("/admin-protected")
@guarded
def admin_protected(
    request: Request,
    gate: AdminGate = Depends(get_gate),
    leads_store: BlobStore = Depends(get_leads_store),
    ):
    payload = gate.authorize(request.headers.get("cookie"))
    if payload is None:
        return unauthorized()
    return HTMLResponse(render_admin_page(payload["username"], list_leads(leads_store)))
