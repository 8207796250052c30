from .closet_fixtures import (
    make_item,
    make_row,
    basic_closet,
    basic_rows,
)

__all__ = [
    "make_item",
    "make_row",
    "basic_closet",
    "basic_rows",
]
