import typer
from lunchctl_cli.commands import agent_cmd

app = typer.Typer(
    help="lunchctl CLI",
    no_args_is_help=True,
    invoke_without_command=False,
    add_completion=False
)


@app.callback()
def callback():
    """lunchctl CLI - Manage macOS launch agents."""
    pass


app.command(name="create")(agent_cmd.create)
app.command(name="show")(agent_cmd.show)
app.command(name="list")(agent_cmd.list_agents)
app.command(name="activate")(agent_cmd.activate)
app.command(name="deactivate")(agent_cmd.deactivate)
app.command(name="status")(agent_cmd.status)
app.command(name="remove")(agent_cmd.remove)
app.command(name="uninstall")(agent_cmd.uninstall)
app.command(name="demo")(agent_cmd.demo)


def main():
    app()


if __name__ == "__main__":
    main()
