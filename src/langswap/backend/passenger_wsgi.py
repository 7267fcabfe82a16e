"""WSGI entrypoint for deploying the language registry behind Passenger."""

from langswap.backend.app import create_app

# Passenger expects a module-level variable named ``application``.
application = create_app()
