"""Text helpers: sort parameter parsing and slug-like replacement."""

from __future__ import annotations


def sort_to_map(params_sort: str) -> dict[str, str]:
    """Turn "name,-created_at" into {"name": "ASC", "created_at": "DESC"}.

    Raises ValueError when one of the comma-separated fields is empty.
    """
    result: dict[str, str] = {}
    parts = params_sort.split(",")
    if parts[0] == "":
        return result

    for part in parts:
        field = part.strip()
        if not field:
            raise ValueError(f"empty sort field in {params_sort!r}")
        if field.startswith("-"):
            result[field[1:]] = "DESC"
        else:
            result[field] = "ASC"
    return result


def replace_space_and_dot(text: str, replacement: str) -> str:
    """Lower-case text and replace every space and dot with replacement."""
    return "".join(replacement if ch in " ." else ch.lower() for ch in text)