from pysetmap.errors import CapabilityError, SetMapError
from pysetmap.file_lengths import FileLength, HashFileLengthToPathsMap, SortedFileLengthToPathsMap
from pysetmap.set_maps import (
    HashSetMap,
    SetMap,
    SortedSetMap,
    hash_set_insert,
    set_contains,
    set_insert,
    sorted_set_insert,
)

__all__ = [
    "CapabilityError",
    "FileLength",
    "HashFileLengthToPathsMap",
    "HashSetMap",
    "SetMap",
    "SetMapError",
    "SortedFileLengthToPathsMap",
    "SortedSetMap",
    "hash_set_insert",
    "set_contains",
    "set_insert",
    "sorted_set_insert",
]
