"""
ASGI config for the officials_management project.

Exposes the ASGI callable as a module-level variable named ``application``
for servers such as uvicorn or daphne.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "officials_management.config.settings.production")

application = get_asgi_application()
