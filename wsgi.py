"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 2 --threads 4 -b 0.0.0.0:8000 wsgi:app
"""

from lotto_board import create_app

app = create_app()
