"""Display format options, e.g. `-f:mb2` or `-kb0`."""

import dataclasses as dc
import re

from showsize.units import SCALE, option_prefix

SUFFIX: dict[str, str] = {
    'b': ' bytes',
    'k': ' KB',
    'm': ' MB',
    'g': ' GB',
    't': ' TB',
    'p': ' PB',
}


@dc.dataclass(frozen=True)
class DisplayFormat:
    scale: int = SCALE['k']
    digits: int = 1
    suffix: str = SUFFIX['k']

    @classmethod
    def of(cls, prefix: str, digits: int = 1):
        if prefix == 'b':
            return cls(scale=1, digits=0, suffix=SUFFIX['b'])

        if not 0 <= digits <= 5:  # noqa: PLR2004
            msg = f'{digits=} not in [0, 5]'
            raise ValueError(msg)

        return cls(scale=SCALE[prefix], digits=digits, suffix=SUFFIX[prefix])

    @property
    def bytes_only(self):
        return self.scale == 1


BYTES = DisplayFormat.of('b')
KILOBYTES = DisplayFormat()

_FORMAT = {
    slash: re.compile(
        rf'{option_prefix(slash=slash)}(?:f:?)?(?:b0?|([gkmpt])b?([0-5]?))'
    )
    for slash in (False, True)
}


def match_format(word: str, *, slash=False):
    return _FORMAT[slash].fullmatch(word)


def parse_format(word: str, *, slash=False) -> DisplayFormat | None:
    """
    Parse a display format option.

    A metric prefix without digits shows one decimal digit; bytes never show
    decimal digits. Returns `None` when `word` is not a format option.
    """
    if (m := match_format(word, slash=slash)) is None:
        return None

    prefix, digits = m.group(1, 2)
    if not prefix:
        return BYTES

    return DisplayFormat.of(prefix, int(digits or 1))
