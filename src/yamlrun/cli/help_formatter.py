"""Custom Click help formatter for organized command display."""

import click


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    - Build: commands that download sources or run builder containers
    - Inventory: read-only reports on the registry and runtime images
    """

    def list_commands(self, ctx: click.Context) -> list[str]:
        # Registration order, not alphabetical
        return list(self.commands)

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        build_names = ["build", "fetch-sources"]

        build_cmds = [(name, cmd) for name, cmd in commands if name in build_names]
        inventory_cmds = [(name, cmd) for name, cmd in commands if name not in build_names]

        if build_cmds:
            with formatter.section("Build"):
                self._format_command_list(formatter, build_cmds)

        if inventory_cmds:
            with formatter.section("Inventory"):
                self._format_command_list(formatter, inventory_cmds)

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((name, help_text))

        if rows:
            formatter.write_dl(rows)
