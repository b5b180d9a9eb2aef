from typing import Any, Iterable


def null_property_names(source: Any, fields: Iterable[str]) -> list[str]:
    """Return the names in `fields` whose value on `source` is None (or missing)."""
    return [field for field in fields if getattr(source, field, None) is None]


def copy_non_null_properties(source: Any, target: Any, fields: Iterable[str]) -> list[str]:
    """
    Copy every field listed in `fields` from `source` onto `target`,
    skipping the ones that are None on `source`.

    `fields` is the explicit table of mergeable properties, so adding a
    property to an entity only means adding its name to that table.
    Returns the names that were copied, in table order.
    """
    fields = tuple(fields)
    skipped = set(null_property_names(source, fields))
    copied = []
    for field in fields:
        if field in skipped:
            continue
        setattr(target, field, getattr(source, field))
        copied.append(field)
    return copied
