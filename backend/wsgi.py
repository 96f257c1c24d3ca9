"""WSGI entrypoint: ``gunicorn -c gunicorn.conf.py wsgi:app`` or ``flask --app wsgi``."""

from account_service import create_app

app = create_app()
