import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from showsize import utils
from showsize.processor import CommandProcessor, Settings

# `-h`, `--help`, `--version` are handled with the other options
app = App(
    name='showsize',
    help='Show file sizes in bytes, kilobytes, megabytes, ...',
    help_flags=[],
    version_flags=[],
    result_action='return_value',
)


@app.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name='--debug', negative=[])] = False,
    log: Annotated[Path | None, Parameter(name='--log')] = None,
) -> int:
    """
    Print the size of each file named on the command line.

    Parameters
    ----------
    tokens : str
        Options (`-a:4kb`, `-f:mb2`, `-b`, ...) followed by file names.
    debug : bool, optional
        Log each option and file to the error stream.
    log : Path | None, optional
        Also write log messages to this file (rotated monthly).
    """
    utils.set_logger('DEBUG' if debug else 'INFO', log_file=log)

    settings = Settings(slash_options=sys.platform == 'win32')
    return int(CommandProcessor(settings).run(tokens))


def main() -> int:
    return app()


if __name__ == '__main__':
    sys.exit(main())
