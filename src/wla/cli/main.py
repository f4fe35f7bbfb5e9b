"""wla CLI entry point: ``wls -l -a`` under another name."""

import click

from ..launcher import launch


class PassthroughCommand(click.Command):
    """Command that hands its raw arguments to the callback untouched.

    click's parser would consume ``--`` and reject unknown options; wla
    interprets nothing, so parsing is skipped entirely.
    """

    def parse_args(self, ctx, args):
        ctx.args = list(args)
        return ctx.args


@click.command(
    cls=PassthroughCommand,
    context_settings=dict(help_option_names=[]),
)
@click.pass_context
def cli(ctx):
    """Run wls with long listing and hidden entries enabled.

    Every argument is forwarded to wls after ``-l -a``; wla exits with
    wls's exit status.

    Examples:
        wla                  # wls -l -a
        wla src -R           # wls -l -a src -R
        wla "Some Folder"    # wls -l -a "Some Folder"
    """
    ctx.exit(launch(ctx.args))


def main():
    """Entry point for CLI."""
    # click globs and expands ~ and %VAR% on Windows unless told not to.
    cli(windows_expand_args=False)


if __name__ == "__main__":
    main()
