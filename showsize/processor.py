import dataclasses as dc
import enum
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from loguru import logger
from rich.console import Console

from showsize.formats import KILOBYTES, DisplayFormat, parse_format
from showsize.size import FileSize
from showsize.units import ShowSizeError, parse_unit
from showsize.utils import cnsl, ecnsl

PROGRAM_TITLE = 'Show File Sizes in Bytes, Kilobytes, Megabytes'
LICENSE = 'Apache License or GNU GPL.'

HELP = f"""
{PROGRAM_TITLE}

  showsize  [options]  filenames

Options:
  -? = -help = show summary of command-line syntax
  -a:4kb (example) = allocation unit or cluster size in bytes, KB, MB, etc.
  -b = show sizes in bytes, with commas but no decimal digits
  -kb -kb1 -kb2 = show sizes in kilobytes with 1 or 2 decimal digits
  -mb -mb1 -mb2 = show sizes in megabytes with 1 or 2 decimal digits
  -gb -gb1 -gb2 = show sizes in gigabytes with 1 or 2 decimal digits
  -tb -tb1 -tb2 = show sizes in terabytes with 1 or 2 decimal digits
  -pb -pb1 -pb2 = show sizes in petabytes with 1 or 2 decimal digits
  --debug = write trace messages to the error stream
  --log run.log (example) = also write log messages to a file

The number of decimal digits (fractional digits) above can be from 0 to 5.

{LICENSE}"""

HELP_WORDS = frozenset(['?', '-?', '-h', '-help'])
SLASH_HELP_WORDS = frozenset(['/?', '/h', '/help'])


class ExitStatus(enum.IntEnum):
    FAILURE = -1  # incorrect request or errors found
    UNKNOWN = 0  # help shown or nothing done
    SUCCESS = 1


class Outcome(enum.Enum):
    REPORTED = 'reported'
    NOT_A_FILE = 'not a file'


class UnrecognizedOptionError(ShowSizeError):
    def __str__(self) -> str:
        return f'Option not recognized: {self.arg}'


class HelpRequested(Exception):  # noqa: N818
    pass


class FileSystemProtocol(Protocol):
    def file_size(self, path: str) -> int | None:
        """Size in bytes of a regular file, `None` for anything else."""
        ...


class LocalFileSystem:
    def file_size(self, path: str) -> int | None:  # noqa: PLR6301
        p = Path(path)
        return p.stat().st_size if p.is_file() else None


@dc.dataclass(frozen=True)
class Settings:
    slash_options: bool = False
    unit: int = 1
    display: DisplayFormat = KILOBYTES


@dc.dataclass
class RunTally:
    reported: int = 0
    errors: int = 0

    def status(self):
        if self.errors:
            return ExitStatus.FAILURE
        if self.reported:
            return ExitStatus.SUCCESS
        return ExitStatus.UNKNOWN


@dc.dataclass(frozen=True)
class FileSizeReport:
    path: str
    outcome: Outcome
    size: int | None = None
    rounded: int | None = None
    text: str = ''

    @classmethod
    def not_a_file(cls, path: str):
        return cls(
            path=path,
            outcome=Outcome.NOT_A_FILE,
            text=Outcome.NOT_A_FILE.value,
        )

    @property
    def line(self):
        return f'{self.path} - {self.text}'


@dc.dataclass
class RunContext:
    """Active options and tallies of a single run."""

    settings: Settings = dc.field(default_factory=Settings)
    unit: int = dc.field(init=False)
    display: DisplayFormat = dc.field(init=False)
    tally: RunTally = dc.field(default_factory=RunTally)

    def __post_init__(self):
        self.unit = self.settings.unit
        self.display = self.settings.display

    def report(self, path: str, size: int | None) -> FileSizeReport:
        if size is None:
            self.tally.errors += 1
            return FileSizeReport.not_a_file(path)

        fs = FileSize(size, unit=self.unit, fmt=self.display)
        self.tally.reported += 1
        return FileSizeReport(
            path=path,
            outcome=Outcome.REPORTED,
            size=fs.size,
            rounded=fs.rounded,
            text=str(fs),
        )


def show_help(console: Console | None = None):
    console = console or ecnsl
    console.print(HELP, markup=False, highlight=False)


class CommandProcessor:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        fs: FileSystemProtocol | None = None,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._fs = fs or LocalFileSystem()
        self._out = out or cnsl
        self._err = err or ecnsl

    def is_help(self, word: str):
        return word in HELP_WORDS or (
            self.settings.slash_options and word in SLASH_HELP_WORDS
        )

    def is_option(self, word: str):
        return word.startswith('-') or (
            self.settings.slash_options and word.startswith('/')
        )

    def process(self, context: RunContext, arg: str) -> FileSizeReport | None:
        """
        Handle one command-line argument.

        Precedence: empty, help, allocation unit, display format,
        unrecognized option, file name.

        Raises
        ------
        HelpRequested
            If `arg` asks for help.
        ShowSizeError
            If `arg` is an invalid allocation unit or an unknown option.
        """
        word = arg.lower()
        slash = self.settings.slash_options

        if not word:
            return None

        if self.is_help(word):
            raise HelpRequested(arg)

        if (unit := parse_unit(word, slash=slash, arg=arg)) is not None:
            context.unit = unit
            logger.debug('Allocation unit={:,} bytes', unit)
            return None

        if (display := parse_format(word, slash=slash)) is not None:
            context.display = display
            logger.debug('Display format={}', display)
            return None

        if self.is_option(word):
            raise UnrecognizedOptionError(arg)

        report = context.report(arg, self._fs.file_size(arg))
        logger.debug(
            '{} | size={} | rounded={}', report.path, report.size, report.rounded
        )
        # arguments are echoed verbatim, tabs included
        print(report.line, file=self._out.file)

        return report

    def run(self, args: Iterable[str], context: RunContext | None = None):
        context = context or RunContext(self.settings)

        try:
            for arg in args:
                self.process(context, arg)
        except HelpRequested:
            show_help(self._err)
            return ExitStatus.UNKNOWN
        except ShowSizeError as e:
            logger.error(str(e))
            show_help(self._err)
            return ExitStatus.FAILURE

        logger.debug(
            'reported={} | errors={}', context.tally.reported, context.tally.errors
        )

        if (status := context.tally.status()) is ExitStatus.UNKNOWN:
            show_help(self._err)

        return status
