import os
from typing import NoReturn

import typer

from .config import Settings
from .dispatch import evaluate
from .errors import ExitCode, LaunchError
from .flags import HelpRequested, VersionRequested
from .help import HELP_TEXT
from .launch import Launcher
from .logging import get_logger
from .outcome import ConfigurationFailure, ResolutionFailure, Success

app = typer.Typer(
    help="syn - open files with 'Synalyze It!' and 'Hex Fiend'",
    add_completion=False,
)


def fail(message: str, code: ExitCode) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=int(code))


# The flag vocabulary (-ss, -xo, unknown options ignored) is owned by
# syn.flags, so every token is handed through untouched.
@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def run(ctx: typer.Context) -> None:
    """
    Resolve file arguments and open them in the selected application(s).
    """
    logger = get_logger(__name__)
    tokens = list(ctx.args)

    outcome = evaluate(tokens, base_directory=os.getcwd())

    if isinstance(outcome, HelpRequested):
        typer.echo(HELP_TEXT)
        return
    if isinstance(outcome, VersionRequested):
        typer.echo(f"syn {outcome.version}")
        return
    if isinstance(outcome, ConfigurationFailure):
        fail(outcome.message, ExitCode.CONFIGURATION_ERROR)
    if isinstance(outcome, ResolutionFailure):
        fail(outcome.message, ExitCode.RESOLUTION_ERROR)

    assert isinstance(outcome, Success)
    logger.debug(f"Launching with {len(outcome.paths)} path(s)")
    launcher = Launcher(Settings.from_env())
    try:
        launcher.launch(outcome.flags, outcome.paths)
    except LaunchError as exc:
        fail(str(exc), ExitCode.LAUNCH_ERROR)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
