"""Launch agent management commands."""

import time
from pathlib import Path

import typer
from lunchctl import (
    AgentActions,
    AgentDescriptorBuilder,
    AgentStore,
    LaunchctlController,
    LunchctlError,
    ProcessType,
)
from lunchctl.config import ConfigManager
from lunchctl.models import ActionResult
from lunchctl_logging import configure_from_config
from rich.console import Console
from rich.table import Table

console = Console()


def _get_agent_actions() -> AgentActions:
    """Get AgentActions configured from the lunchctl config file."""
    config = ConfigManager().config
    configure_from_config(config)
    store = AgentStore()
    controller = LaunchctlController(
        resolver=store.resolver,
        launchctl=config.launchctl_path,
        timeout=config.command_timeout,
    )
    return AgentActions(store=store, controller=controller)


def _report(result: ActionResult) -> None:
    if result.success:
        console.print(f"[green]✓[/green] {result.message}")
    else:
        console.print(f"[red]✗[/red] {result.message}")
        raise typer.Exit(code=1)


def _build_descriptor(
    label: str,
    program_arguments: list[str],
    stdout_path: Path,
    stderr_path: Path,
    keep_alive: bool,
    run_at_load: bool,
    process_type: ProcessType,
):
    return (
        AgentDescriptorBuilder()
        .label(label)
        .args(program_arguments)
        .standard_out_path(stdout_path)
        .standard_error_path(stderr_path)
        .keep_alive(keep_alive)
        .run_at_load(run_at_load)
        .process_type(process_type)
        .build()
    )


def create(
    label: str = typer.Argument(..., help="Agent label, e.g. co.example.agent"),
    program_arguments: list[str] = typer.Argument(None, help="Executable and its arguments"),
    stdout_path: Path = typer.Option(Path("/dev/null"), "--stdout", help="Redirect stdout to this file"),
    stderr_path: Path = typer.Option(Path("/dev/null"), "--stderr", help="Redirect stderr to this file"),
    keep_alive: bool = typer.Option(False, "--keep-alive/--no-keep-alive", help="Restart the process when it exits"),
    run_at_load: bool = typer.Option(False, "--run-at-load/--no-run-at-load", help="Start as soon as it is bootstrapped"),
    process_type: ProcessType = typer.Option(ProcessType.STANDARD, "--process-type", help="Scheduling class"),
    activate: bool = typer.Option(False, "--activate", help="Bootstrap the agent after writing it"),
):
    """Write a launch agent descriptor."""
    try:
        descriptor = _build_descriptor(
            label, program_arguments or [], stdout_path, stderr_path,
            keep_alive, run_at_load, process_type,
        )
    except LunchctlError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    actions = _get_agent_actions()
    if activate:
        _report(actions.install(descriptor))
    else:
        _report(actions.create(descriptor))


def show(label: str = typer.Argument(..., help="Agent label")):
    """Show a launch agent descriptor."""
    actions = _get_agent_actions()
    try:
        descriptor = actions.store.read(label)
    except LunchctlError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=descriptor.label)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("ProgramArguments", " ".join(descriptor.program_arguments) or "N/A")
    table.add_row("StandardOutPath", str(descriptor.standard_out_path))
    table.add_row("StandardErrorPath", str(descriptor.standard_error_path))
    table.add_row("KeepAlive", "✓ Yes" if descriptor.keep_alive else "✗ No")
    table.add_row("RunAtLoad", "✓ Yes" if descriptor.run_at_load else "✗ No")
    table.add_row("ProcessType", descriptor.process_type.value)
    table.add_row("Path", str(actions.store.path_for(label)))

    console.print(table)


def list_agents():
    """List descriptors in ~/Library/LaunchAgents."""
    actions = _get_agent_actions()
    try:
        labels = actions.store.list_labels()
    except LunchctlError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    if not labels:
        console.print("[dim]No launch agents found[/dim]")
        return
    for label in labels:
        console.print(label)


def activate(label: str = typer.Argument(..., help="Agent label")):
    """Bootstrap an agent into the current GUI session."""
    _report(_get_agent_actions().activate(label))


def deactivate(label: str = typer.Argument(..., help="Agent label")):
    """Boot out an agent from the current GUI session."""
    _report(_get_agent_actions().deactivate(label))


def remove(label: str = typer.Argument(..., help="Agent label")):
    """Delete an agent's descriptor file."""
    _report(_get_agent_actions().remove(label))


def uninstall(label: str = typer.Argument(..., help="Agent label")):
    """Boot out an agent and delete its descriptor."""
    _report(_get_agent_actions().uninstall(label))


def status(label: str = typer.Argument(..., help="Agent label")):
    """Check whether an agent is installed and running."""
    actions = _get_agent_actions()
    try:
        agent_status = actions.status(label)
    except LunchctlError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Launch Agent Status")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Label", agent_status.label)
    table.add_row("Path", str(agent_status.path))
    table.add_row("Installed", "✓ Yes" if agent_status.installed else "✗ No")
    table.add_row("Running", "✓ Yes" if agent_status.running else "✗ No")

    console.print(table)


def demo(
    wait: float = typer.Option(0.3, help="Seconds to let launchd start the job"),
):
    """Install a throwaway agent, check it runs, then remove it."""
    label = f"co.lunchctl.example.{int(time.time())}"
    descriptor = (
        AgentDescriptorBuilder()
        .label(label)
        .args(["/usr/bin/tail", "-f", "/dev/null"])
        .keep_alive(True)
        .run_at_load(True)
        .build()
    )
    actions = _get_agent_actions()

    try:
        console.print(f"[yellow]Writing plist to {actions.store.path_for(label)}[/yellow]")
        actions.store.write(descriptor)

        console.print(f"[yellow]Bootstrapping '{label}'[/yellow]")
        actions.controller.activate(descriptor)

        time.sleep(wait)
        running = actions.controller.is_running(descriptor)
        console.print(f"Is running: {running}")

        console.print(f"[yellow]Booting out '{label}'[/yellow]")
        actions.controller.deactivate(descriptor)

        console.print(f"[yellow]Removing plist {actions.store.path_for(label)}[/yellow]")
        actions.store.remove(descriptor)
    except LunchctlError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    console.print("[green]✓[/green] Demo finished")
