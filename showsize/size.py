from showsize.formats import KILOBYTES, DisplayFormat

_WORD = 2**64


def _int64(value: int):
    # two's complement wraparound of a signed 64-bit product
    value %= _WORD
    return value - _WORD if value >= _WORD // 2 else value


def round_up(size: int, unit: int) -> int:
    """
    Round `size` up to a whole number of allocation units.

    Exact when `unit` is one byte. For larger units the product wraps like a
    signed 64-bit integer if `size` is close to `2**63 - 1`.
    """
    quotient, remainder = divmod(size, unit)
    if remainder > 0:
        quotient += 1

    return _int64(quotient * unit)


def render(size: int, fmt: DisplayFormat = KILOBYTES) -> str:
    # floating point only above the bytes scale
    if fmt.bytes_only:
        return f'{size:,}{fmt.suffix}'

    return f'{size / fmt.scale:,.{fmt.digits}f}{fmt.suffix}'


class FileSize:
    def __init__(self, size: int, *, unit: int = 1, fmt: DisplayFormat = KILOBYTES):
        self._bytes = size
        self._rounded = round_up(size, unit)
        self._fmt = fmt

    def __str__(self) -> str:
        return render(self._rounded, self._fmt)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._bytes})'

    @property
    def size(self):
        return self._bytes

    @property
    def rounded(self):
        return self._rounded
