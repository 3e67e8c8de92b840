"""Helpers reading attribute codes out of a resolver's selection set"""
from typing import Iterable, Set

from strawberry.types import Info
from strawberry.types.nodes import SelectedField, Selection


def _fields(selections: Iterable[Selection]) -> Iterable[SelectedField]:
    # fragments are flattened into the fields they select
    for selection in selections:
        if isinstance(selection, SelectedField):
            yield selection
        else:
            yield from _fields(selection.selections)


def requested_attribute_codes(info: Info) -> Set[str]:
    """
    Collect the ``codes`` arguments of every ``product { attributes(codes:) }``
    selected below the current field.
    """
    codes: Set[str] = set()
    for field in _fields(info.selected_fields):
        for product in _fields(field.selections):
            if product.name != "product":
                continue
            for attributes in _fields(product.selections):
                if attributes.name == "attributes":
                    codes.update(attributes.arguments.get("codes") or ())
    return codes
