"""Loading spinner."""

from __future__ import annotations

from markupsafe import Markup

_LOADING = Markup(
    '<div class="loading-spinner flex flex-col items-center justify-center py-8">'
    '<div class="spinner w-12 h-12 border-4 border-blue-400 border-t-transparent'
    ' rounded-full animate-spin mb-4"></div>'
    '<p class="text-blue-700 font-semibold">Loading...</p>'
    "</div>"
)


def render_loading() -> Markup:
    """Render the loading spinner."""
    return _LOADING