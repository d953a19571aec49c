"""
Ordered key/value fields attached to a log entry
"""

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Iterable, List

FORMAT_KEY = "Format"


@dataclass
class Field:
    """
    One ordered datum of a log entry.

    A field keyed FORMAT_KEY holds a printf-style template; every other
    field of the entry becomes one of its positional arguments.
    """

    order: int
    key: str
    value: Any


def make_fields(start_index: int, *values: Any) -> List[Field]:
    """
    Build positional fields.

    Args:
        start_index: Order of the first field
        *values: Field values, one field each

    Returns:
        Fields keyed "Field<order>" in ascending order
    """
    return [
        Field(index, f"Field{index}", value)
        for index, value in enumerate(values, start=start_index)
    ]


def make_format_fields(template: str, *values: Any) -> List[Field]:
    """Build a FORMAT_KEY field followed by its argument fields."""
    return [Field(1, FORMAT_KEY, template)] + make_fields(1, *values)


def sort_fields(fields: Iterable[Field]) -> List[Field]:
    """Stable sort by order; ties keep emission order."""
    return sorted(fields, key=attrgetter("order"))


def render_body(fields: Iterable[Field]) -> str:
    """
    Render the message body of an entry.

    Args:
        fields: Entry fields in any order

    Returns:
        The template applied to the remaining values when a FORMAT_KEY
        field is present, otherwise the values concatenated. A template
        that does not fit its arguments is rendered by fallback_body().
    """
    template = None
    args = []
    for fd in sort_fields(fields):
        if fd.key == FORMAT_KEY:
            template = str(fd.value)
        else:
            args.append(fd.value)

    if template is None:
        return "".join(str(v) for v in args)
    try:
        return template % tuple(args)
    except (TypeError, ValueError, KeyError):
        return fallback_body(template, args)


def fallback_body(template: str, args: List[Any]) -> str:
    """
    Render a template that cannot be applied to its arguments.

    The template is kept verbatim and the arguments are appended in an
    ``%!(EXTRA ...)`` marker, so the record is never lost.
    """
    if not args:
        return template
    return f"{template}%!(EXTRA {', '.join(str(v) for v in args)})"
