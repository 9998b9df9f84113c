"""Page shown for unknown routes."""

from __future__ import annotations

from markupsafe import Markup

_NOT_FOUND = Markup(
    '<div class="not-found-page flex flex-col items-center justify-center'
    ' min-h-[60vh] text-center space-y-4">'
    '<h2 class="text-3xl font-bold text-red-600">404 - Page Not Found</h2>'
    '<p class="text-lg text-gray-600">The page you are looking for does not exist.</p>'
    '<a href="/"'
    ' class="mt-4 px-6 py-2 bg-blue-600 text-white rounded hover:bg-blue-700 transition">'
    "Go to Home</a>"
    "</div>"
)


def render_not_found() -> Markup:
    """Render the not-found page with a link back home."""
    return _NOT_FOUND