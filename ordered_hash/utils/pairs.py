"""
Helpers for handling key-value pairs passed as flat argument lists.

Several methods of `~ordered_hash.ordered_map.OrderedMap` accept their pairs
as positional arguments that alternate between keys and values::

    ordered_map.push('a', 1, 'b', 2)

The functions in this module validate such argument lists and turn them into
lists of ``(key, value)`` tuples.
"""

import typing

KeyT = typing.TypeVar("KeyT")
ValueT = typing.TypeVar("ValueT")


class InvalidArgumentError(ValueError):
    """
    Raised when a flat list of key-value pairs is malformed.

    This is a subclass of ``ValueError``, so code that catches ``ValueError``
    also catches this exception.
    """
    pass


def split_pairs(
        flat: typing.Sequence[typing.Any],
        caller: str = "OrderedMap") -> typing.List[typing.Tuple[
            typing.Any, typing.Any]]:
    """
    Split a flat sequence of alternating keys and values into pairs.

    Example::

        split_pairs(['a', 1, 'b', 2])  # -> [('a', 1), ('b', 2)]

    :param flat:
        sequence where the elements at even indices are keys and each key is
        followed by its value.
    :param caller:
        name of the operation that received the sequence. It is only used in
        the error message.
    :return:
        list of ``(key, value)`` tuples in the order in which they appear in
        ``flat``.
    :raise InvalidArgumentError:
        if ``flat`` has an odd number of elements, so that the last key has no
        value.
    """
    if len(flat) % 2 != 0:
        raise InvalidArgumentError(
            f"{caller} requires key-value pairs, but got an odd number of "
            f"arguments ({len(flat)}): the key {flat[-1]!r} has no value.")
    return list(zip(flat[0::2], flat[1::2]))


def distinct_keys(
        pairs: typing.Iterable[typing.Tuple[KeyT, ValueT]]
) -> typing.Tuple[typing.Dict[KeyT, ValueT], typing.List[KeyT]]:
    """
    Build a lookup table and an order list from a sequence of pairs.

    This behaves like assigning the pairs to a ``dict`` one after the other: if
    a key is repeated, the last value wins, but the key keeps the position of
    its first occurrence.

    :param pairs:
        iterable of ``(key, value)`` tuples.
    :return:
        tuple of the lookup table (``dict``) and the list of distinct keys in
        order of their first occurrence.
    """
    table = {}
    order = []
    for key, value in pairs:
        if key not in table:
            order.append(key)
        table[key] = value
    return table, order
