"""HTML pages rendered for the browser leg of the OAuth handshake."""

from __future__ import annotations

from html import escape

_BUTTON_STYLE = (
    "padding: 10px 20px; background: #4285f4; color: white; "
    "border: none; border-radius: 5px; cursor: pointer;"
)

_PAGE = """<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><title>{title}</title></head>
  <body style="font-family: Arial, sans-serif; padding: 40px; text-align: center;">
    <h2 style="color: {color};">{title}</h2>
    {body}
    <button onclick="window.close()" style="{button_style}">Close Window</button>
    {script}
  </body>
</html>
"""

_AUTO_CLOSE = "<script>setTimeout(function () { window.close(); }, 2000);</script>"


def _render(title: str, color: str, body: str, *, auto_close: bool = False) -> str:
    return _PAGE.format(
        title=escape(title),
        color=color,
        body=body,
        button_style=_BUTTON_STYLE,
        script=_AUTO_CLOSE if auto_close else "",
    )


def success_page(email: str | None) -> str:
    who = escape(email) if email else "your Google account"
    return _render(
        "Authentication Successful!",
        "#34a853",
        f"<p>You are now signed in as: <strong>{who}</strong></p>"
        "<p>You can close this window and return to the application.</p>",
        auto_close=True,
    )


def failure_page(message: str) -> str:
    return _render("Authentication Failed", "#ea4335", f"<p>{escape(message)}</p>")


def error_page(message: str) -> str:
    return _render("OAuth Error", "#ea4335", f"<p>{escape(message)}</p>")
