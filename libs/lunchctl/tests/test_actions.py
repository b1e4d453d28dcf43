"""Unit tests for agent actions."""

from lunchctl.actions import AgentActions
from lunchctl.models import ActionResult, AgentStatus, ShellResult
from lunchctl.models.agent import AgentDescriptor


class TestActionResult:
    """Tests for ActionResult dataclass."""

    def test_default_values(self):
        result = ActionResult(success=True, message="Done")

        assert result.success is True
        assert result.message == "Done"
        assert result.data is None


class TestAgentActions:
    """Tests for AgentActions class."""

    def test_default_controller_shares_resolver(self, store):
        actions = AgentActions(store=store)

        assert actions.controller.resolver is store.resolver

    def test_create(self, store, controller, runner):
        """Test create writes without calling launchctl."""
        actions = AgentActions(store=store, controller=controller)

        result = actions.create(AgentDescriptor("co.example.test"))

        assert result.success is True
        assert store.exists("co.example.test")
        assert runner.calls == []

    def test_install(self, store, controller, runner):
        """Test install writes the descriptor then bootstraps it."""
        actions = AgentActions(store=store, controller=controller)
        agent = AgentDescriptor("co.example.test", ["/bin/sleep", "100"], run_at_load=True)

        result = actions.install(agent)

        assert result.success is True
        assert result.data == {"path": str(store.path_for("co.example.test"))}
        assert store.read("co.example.test") == agent
        assert runner.calls[0][1] == "bootstrap"

    def test_install_command_failure(self, store, make_controller):
        controller, _ = make_controller(ShellResult(code=37, out="", err="Operation already in progress"))
        actions = AgentActions(store=store, controller=controller)

        result = actions.install(AgentDescriptor("co.example.test"))

        assert result.success is False
        assert "Operation already in progress" in result.message

    def test_uninstall(self, store, controller, runner):
        """Test uninstall boots out then removes the descriptor."""
        actions = AgentActions(store=store, controller=controller)
        store.write(AgentDescriptor("co.example.test"))

        result = actions.uninstall("co.example.test")

        assert result.success is True
        assert not store.exists("co.example.test")
        assert [call[1] for call in runner.calls] == ["bootout"]

    def test_uninstall_missing(self, store, controller, runner):
        """Test uninstalling an unknown label fails without calling launchctl."""
        actions = AgentActions(store=store, controller=controller)

        result = actions.uninstall("co.example.missing")

        assert result.success is False
        assert runner.calls == []

    def test_uninstall_keeps_file_when_bootout_fails(self, store, make_controller):
        controller, _ = make_controller(ShellResult(code=5, out="", err="Boot-out failed"))
        actions = AgentActions(store=store, controller=controller)
        store.write(AgentDescriptor("co.example.test"))

        result = actions.uninstall("co.example.test")

        assert result.success is False
        assert store.exists("co.example.test")

    def test_activate_and_deactivate(self, store, controller, runner):
        actions = AgentActions(store=store, controller=controller)
        store.write(AgentDescriptor("co.example.test"))

        assert actions.activate("co.example.test").success is True
        assert actions.deactivate("co.example.test").success is True
        assert [call[1] for call in runner.calls] == ["bootstrap", "bootout"]
        assert store.exists("co.example.test")

    def test_remove(self, store, controller):
        actions = AgentActions(store=store, controller=controller)
        store.write(AgentDescriptor("co.example.test"))

        assert actions.remove("co.example.test").success is True
        assert actions.remove("co.example.test").success is False

    def test_status(self, store, make_controller):
        controller, _ = make_controller(ShellResult(code=0, out="job state = running"))
        actions = AgentActions(store=store, controller=controller)
        store.write(AgentDescriptor("co.example.test"))

        status = actions.status("co.example.test")

        assert status == AgentStatus(
            label="co.example.test",
            path=store.path_for("co.example.test"),
            installed=True,
            running=True,
        )

    def test_status_not_installed(self, store, make_controller):
        controller, _ = make_controller(ShellResult(code=113, out="", err="Could not find service"))
        actions = AgentActions(store=store, controller=controller)

        status = actions.status("co.example.test")

        assert status.installed is False
        assert status.running is False
