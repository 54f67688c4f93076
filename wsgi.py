"""WSGI shim (inert).

Delegates to mapbridge.create_app() so there is a single
source of truth for all endpoints.
"""

from mapbridge import create_app

app = create_app()

# Export for gunicorn compatibility if someone uses `wsgi:application`
application = app
