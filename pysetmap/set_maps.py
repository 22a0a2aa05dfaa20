from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator, MutableMapping, MutableSet
from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar

from sortedcontainers import SortedDict, SortedSet

from pysetmap.errors import CapabilityError

logger = logging.getLogger(__name__)

HashableKeyType = TypeVar("HashableKeyType", bound=Hashable)
HashableValueType = TypeVar("HashableValueType", bound=Hashable)


def set_insert(
    mapping: MutableMapping[HashableKeyType, MutableSet[HashableValueType]],
    key: HashableKeyType,
    value: HashableValueType,
    set_factory: Callable[[], MutableSet[HashableValueType]] = set,
) -> bool:
    """
    Add ``value`` to the set stored under ``key``, creating the set when the key is absent.

    Returns whether the value was newly added. A new set is populated before it is stored,
    so a rejected key or value never leaves an empty set in the mapping.
    """
    try:
        values = mapping.get(key)
    except TypeError as e:
        raise CapabilityError("key", key, "hashable") from e

    if values is None:
        values = set_factory()
        try:
            values.add(value)
        except TypeError as e:
            raise CapabilityError("value", value, "hashable") from e
        mapping[key] = values
        logger.debug("created values set for key %r", key)
        return True

    try:
        if value in values:
            return False
        values.add(value)
    except TypeError as e:
        raise CapabilityError("value", value, "accepted by the values set") from e
    return True


def set_contains(
    mapping: MutableMapping[HashableKeyType, MutableSet[HashableValueType]],
    key: HashableKeyType,
    value: HashableValueType,
) -> bool:
    try:
        values = mapping.get(key)
        return values is not None and value in values
    except TypeError as e:
        raise CapabilityError("key or value", (key, value), "hashable") from e


def hash_set_insert(
    mapping: dict[HashableKeyType, set[HashableValueType]], key: HashableKeyType, value: HashableValueType
) -> bool:
    return set_insert(mapping, key, value, set)


def sorted_set_insert(mapping: SortedDict, key: HashableKeyType, value: HashableValueType) -> bool:
    # ordering is probed before mutating, SortedSet.add touches its hash set before its sorted list
    try:
        mapping.bisect_left(key)
    except TypeError as e:
        raise CapabilityError("key", key, "comparable with the existing keys") from e

    try:
        values = mapping.get(key)
    except TypeError as e:
        raise CapabilityError("key", key, "hashable") from e

    if values is not None:
        try:
            values.bisect_left(value)
        except TypeError as e:
            raise CapabilityError("value", value, "comparable with the existing values") from e

    return set_insert(mapping, key, value, SortedSet)


@dataclass
class SetMap(Generic[HashableKeyType, HashableValueType]):
    mapping: MutableMapping[HashableKeyType, MutableSet[HashableValueType]] = field(default_factory=dict)

    set_factory: ClassVar[Callable[[], MutableSet]] = set

    def insert(self, key: HashableKeyType, value: HashableValueType) -> bool:
        return set_insert(self.mapping, key, value, self.set_factory)

    def contains(self, key: HashableKeyType, value: HashableValueType) -> bool:
        return set_contains(self.mapping, key, value)

    def iter_keys(self) -> Iterator[HashableKeyType]:
        yield from self.mapping.keys()

    def iter_values(self, key: HashableKeyType) -> Iterator[HashableValueType]:
        yield from self.mapping.get(key, ())

    @property
    def keys_count(self) -> int:
        return len(self.mapping)

    @property
    def values_count(self) -> int:
        return sum(len(values) for values in self.mapping.values())

    def count_values(self, key: HashableKeyType) -> int:
        return len(self.mapping.get(key, ()))

    def __contains__(self, key: object) -> bool:
        return key in self.mapping

    def __len__(self) -> int:
        return len(self.mapping)


@dataclass
class HashSetMap(SetMap[HashableKeyType, HashableValueType]):
    """Keys and values live in a ``dict`` of ``set``; iteration order is not guaranteed."""

    mapping: dict[HashableKeyType, set[HashableValueType]] = field(default_factory=dict)


@dataclass
class SortedSetMap(SetMap[HashableKeyType, HashableValueType]):
    """Keys and values live in a ``SortedDict`` of ``SortedSet`` and iterate in ascending order."""

    mapping: SortedDict = field(default_factory=SortedDict)

    set_factory = SortedSet

    def insert(self, key: HashableKeyType, value: HashableValueType) -> bool:
        return sorted_set_insert(self.mapping, key, value)
