from npdiff.adapters import bytes_diff, ints, runes, sequences, strings
from npdiff.onp import Change, Interface, diff

__all__ = [
    "Change",
    "Interface",
    "diff",
    "bytes_diff",
    "ints",
    "runes",
    "strings",
    "sequences",
]
