from __future__ import annotations
import re


TYPE = '@type'
VALUE = '@value'
ID = '@id'


def minify(data: dict, prefix: str | re.Pattern | None = None) -> dict:
    """
    Rewrite a JSON-LD node object to plain JSON.

    Drops ``@type``, replaces value objects and node references in lists with
    their bare value or id, and recurses into nested objects. When ``prefix``
    (a regular expression) matches the start of a key, the matched part is
    removed from it.

    A shortened key replaces an existing key of the same name, whatever their
    order; between two shortened keys the last one wins.
    """
    if isinstance(prefix, str):
        prefix = re.compile(prefix)

    result: dict = {}
    shortened: set = set()
    for key, value in data.items():
        if key == TYPE:
            continue

        match = prefix.match(key) if prefix else None
        if match and match.end():
            key = key[match.end():]
            shortened.add(key)
        elif key in shortened:
            continue

        if isinstance(value, list):
            value = [unwrap(item) for item in value]
        elif isinstance(value, dict):
            value = minify(value, prefix)

        result[key] = value

    return result


def unwrap(item):
    if isinstance(item, dict):
        if VALUE in item:
            return item[VALUE]
        elif ID in item:
            return item[ID]
    return item
