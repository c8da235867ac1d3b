"""Turn a query fragment into an OpenAPI ``parameters`` list."""


def parameter_sort_key(param: dict) -> tuple[bool, str]:
    """Required parameters first, then by name."""
    return (not param["required"], param["name"])


def build_parameters(query: dict | None) -> list[dict]:
    if not query:
        return []
    properties = query.get("properties") or {}
    required = set(query.get("required") or [])
    params = [
        {
            "in": "query",
            "name": name,
            "required": name in required,
            "schema": schema,
        }
        for name, schema in properties.items()
    ]
    return sorted(params, key=parameter_sort_key)
