"""Error message box with an optional retry link."""

from __future__ import annotations

from markupsafe import Markup


def render_error(message: str, retry_url: str | None = None) -> Markup:
    """Render *message*; a retry link is shown when *retry_url* is given."""
    if retry_url is None:
        retry = Markup("")
    else:
        retry = Markup(
            '<a href="{href}"'
            ' class="px-4 py-2 bg-red-600 text-white rounded hover:bg-red-700 transition">'
            "Retry</a>"
        ).format(href=retry_url)
    return Markup(
        '<div class="error-container flex flex-col items-center justify-center'
        ' bg-red-50 border border-red-200 rounded p-6 my-4">'
        '<div class="error-icon text-4xl mb-2">⚠️</div>'
        '<p class="error-message text-red-700 font-semibold mb-2">{message}</p>'
        "{retry}"
        "</div>"
    ).format(message=message, retry=retry)