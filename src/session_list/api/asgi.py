"""ASGI entrypoint for the session list API."""

from session_list.api.app import create_app
from session_list.containers import build_container

app = create_app(build_container())
