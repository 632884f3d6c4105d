"""Hash digit helpers.

Every visual decision made for an icon is read from single hexadecimal digits
("octets") of the hash at fixed indexes, plus a hue taken from the trailing
seven digits. Both helpers are pure and never validate length up front: a hash
too short for an octet lookup raises ``IndexError``, an empty one raises
``ValueError`` from ``hue``.
"""

from grid_identicon.types import Hash

HUE_DIGITS = 7
HUE_MAX = 0xFFFFFFF


def octet(hash: Hash, index: int) -> int:
    """Return the value (0-15) of the hexadecimal digit at ``index``."""
    return int(hash[index], 16)


def hue(hash: Hash) -> float:
    """Return the hue in ``[0, 1]`` encoded by the last seven digits.

    A hash shorter than seven digits contributes all of its digits. An empty
    hash raises ``ValueError`` (from ``int("", 16)``), whereas a hash too short
    for an ``octet`` lookup raises ``IndexError`` there.
    """
    return int(hash[-HUE_DIGITS:], 16) / HUE_MAX
