from pathlib import Path

from pysetmap.set_maps import HashSetMap, SortedSetMap

# Unsigned 64-bit file length in bytes.
FileLength = int

SortedFileLengthToPathsMap = SortedSetMap[FileLength, Path]
HashFileLengthToPathsMap = HashSetMap[FileLength, Path]
