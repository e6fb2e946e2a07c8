# Vercel serverless entrypoint. The Python runtime serves the ASGI `app`.

from bfhl.main import app  # noqa: F401
