"""Service module that resolves credentials at runtime."""

import json
import os


def _fetch_credential(name: str) -> str:
    """Read sensitive data from the environment at runtime."""

    return os.environ.get(name, "unset")


def handler(event, context):  # pragma: no cover - demo function
    payload = {
        "message": "Credentials resolved at runtime",
        "apiKey": _fetch_credential("API_KEY"),
    }
    return {
        "statusCode": 200,
        "body": json.dumps(payload),
    }
