"""Allocation unit (cluster size) options, e.g. `-a:4kb`."""

import re

MAX_SIZE = 2**63 - 1

# scale factors for metric prefixes
SCALE: dict[str, int] = {
    '': 1,
    'k': 1024,
    'm': 1024**2,
    'g': 1024**3,
    't': 1024**4,
    'p': 1024**5,
}


def option_prefix(*, slash: bool):
    return '[-/]' if slash else '-'


class ShowSizeError(ValueError):
    def __init__(self, arg: str) -> None:
        super().__init__(arg)
        self.arg = arg


class InvalidAllocationUnitError(ShowSizeError):
    def __str__(self) -> str:
        return f'Invalid allocation unit or cluster size: {self.arg}'


_UNIT = {
    slash: re.compile(
        rf'{option_prefix(slash=slash)}(?:a:?)?(\d+)([gkmpt]?)b?', re.ASCII
    )
    for slash in (False, True)
}


def match_unit(word: str, *, slash=False):
    """Match a lower-case token against the allocation unit grammar."""
    return _UNIT[slash].fullmatch(word)


def unit_bytes(number: str, prefix: str, arg: str | None = None) -> int:
    """
    Allocation unit in bytes.

    Parameters
    ----------
    number : str
        Digit run of the option.
    prefix : str
        Metric prefix (`k`, `m`, `g`, `t`, `p`) or empty for bytes.
    arg : str | None, optional
        Original argument text, reported on error.

    Returns
    -------
    int
        `number * SCALE[prefix]`.

    Raises
    ------
    InvalidAllocationUnitError
        If the unit is not positive or exceeds `MAX_SIZE`.
    """
    factor = SCALE[prefix]
    value = int(number)

    if value > MAX_SIZE // factor or (unit := value * factor) <= 0:
        raise InvalidAllocationUnitError(arg or f'{number}{prefix}')

    return unit


def parse_unit(word: str, *, slash=False, arg: str | None = None) -> int | None:
    """
    Parse an allocation unit option.

    Returns `None` when `word` is not an allocation unit option at all.
    """
    if (m := match_unit(word, slash=slash)) is None:
        return None

    return unit_bytes(m.group(1), m.group(2), arg=arg or word)
