import json
from typing import Any

from fastapi import Request


def query_object(request: Request, name: str = "data") -> dict[str, Any]:
    """
    Read an object-valued query parameter.

    Browsers serialise nested objects as `data[id]=1&data[latitude]=47.6`;
    a JSON string (`data={"id": 1}`) is accepted too. Nothing is validated
    here.
    """
    raw = request.query_params.get(name)
    if raw is not None:
        return json.loads(raw)

    prefix = f"{name}["
    return {
        key[len(prefix):-1]: value
        for key, value in request.query_params.items()
        if key.startswith(prefix) and key.endswith("]")
    }
