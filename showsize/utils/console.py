from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.theme import Theme

LEVELS: dict[str, int] = {
    'TRACE': 5,
    'DEBUG': 10,
    'INFO': 20,
    'SUCCESS': 25,
    'WARNING': 30,
    'ERROR': 40,
    'CRITICAL': 50,
}


class _Highlighter(ReprHighlighter):
    highlights = [  # noqa: RUF012
        *ReprHighlighter.highlights,
        r'(?P<unit>\b[KMGTP]B\b|\bbytes\b)',
    ]


# help is printed verbatim
cnsl = Console(soft_wrap=True, markup=False, emoji=False, highlight=False)
ecnsl = Console(
    stderr=True,
    soft_wrap=True,
    markup=False,
    emoji=False,
    highlight=False,
)
ecnsl.push_theme(Theme({'repr.unit': 'bold cyan'}))


def set_logger(
    level: int | str = 20,
    *,
    rich_tracebacks=False,
    log_file: str | Path | None = None,
    **kwargs,
):
    if isinstance(level, str):
        try:
            level = LEVELS[level.upper()]
        except KeyError as e:
            msg = f'`{level}` not in {list(LEVELS.keys())}'
            raise KeyError(msg) from e

    logger.remove()

    _handler = RichHandler(
        console=ecnsl,
        highlighter=_Highlighter(),
        show_path=False,
        log_time_format='[%X]',
        rich_tracebacks=rich_tracebacks,
    )
    logger.add(_handler, level=level, format='{message}', **kwargs)

    if log_file is not None:
        logger.add(
            log_file,
            level=min(20, level),
            rotation='1 month',
            retention='1 year',
            encoding='UTF-8',
        )
