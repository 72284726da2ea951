"""
WSGI config for the carelink project.

It exposes the WSGI callable as a module-level variable named
``application``.  Websocket chat feeds need the ASGI entrypoint
(``carelink.asgi``) instead.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'carelink.settings')

application = get_wsgi_application()
