"""Tests for Command, Runner and new_command."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from apizza.commands._base import ApizzaGroup, Command, new_command


class RecordingRunner:
    def __init__(self, result: object = None, error: Exception | None = None) -> None:
        self.calls: list[tuple[Command, list[str]]] = []
        self.result = result
        self.error = error

    def run(self, cmd: Command, args: list[str]) -> object:
        self.calls.append((cmd, args))
        if self.error is not None:
            raise self.error
        return self.result


def _tree(*commands: click.Command) -> click.Group:
    group = ApizzaGroup("root")
    for cmd in commands:
        group.add_command(cmd)
    return group


class TestNewCommand:
    def test_holds_name_and_description(self) -> None:
        cmd = new_command("order", "place an order", RecordingRunner().run)
        assert isinstance(cmd, Command)
        assert isinstance(cmd, click.Command)
        assert cmd.name == "order"
        assert cmd.use == "order"
        assert cmd.short == "place an order"
        assert cmd.short_help == "place an order"

    def test_construction_does_not_run(self) -> None:
        runner = RecordingRunner()
        new_command("order", "place an order", runner.run)
        assert runner.calls == []

    def test_empty_use_accepted(self) -> None:
        cmd = new_command("", "nameless", RecordingRunner().run)
        assert cmd.use == ""


class TestDispatch:
    def test_args_passed_verbatim(self, cli_runner: CliRunner) -> None:
        runner = RecordingRunner()
        cmd = new_command("order", "place an order", runner.run)
        result = cli_runner.invoke(_tree(cmd), ["order", "large", "pepperoni", "-x"])
        assert result.exit_code == 0, result.output
        assert len(runner.calls) == 1
        called_cmd, args = runner.calls[0]
        assert called_cmd is cmd
        assert args == ["large", "pepperoni", "-x"]

    def test_no_args_gives_empty_list(self, cli_runner: CliRunner) -> None:
        runner = RecordingRunner()
        result = cli_runner.invoke(_tree(new_command("order", "o", runner.run)), ["order"])
        assert result.exit_code == 0
        assert runner.calls[0][1] == []

    def test_callback_matches_direct_run(self) -> None:
        runner = RecordingRunner(result="done")
        cmd = new_command("order", "o", runner.run)
        assert cmd.callback is not None
        assert cmd.callback(args=("a", "b")) == runner.run(cmd, ["a", "b"])
        assert runner.calls[0][1] == runner.calls[1][1] == ["a", "b"]

    def test_runner_error_propagates_unchanged(self) -> None:
        boom = RuntimeError("oven on fire")
        cmd = new_command("order", "o", RecordingRunner(error=boom).run)
        assert cmd.callback is not None
        with pytest.raises(RuntimeError) as excinfo:
            cmd.callback(args=())
        assert excinfo.value is boom

    def test_click_exception_reported_by_dispatcher(self, cli_runner: CliRunner) -> None:
        runner = RecordingRunner(error=click.ClickException("store closed"))
        result = cli_runner.invoke(_tree(new_command("order", "o", runner.run)), ["order"])
        assert result.exit_code == 1
        assert "store closed" in result.output


class TestOptions:
    def test_declared_option_readable_in_run(self, cli_runner: CliRunner) -> None:
        seen: dict[str, object] = {}

        def run(cmd: Command, args: list[str]) -> None:
            seen["size"] = cmd.option("size")
            seen["args"] = args

        cmd = new_command(
            "order",
            "o",
            run,
            params=[click.Option(["--size"], default="medium")],
        )
        result = cli_runner.invoke(_tree(cmd), ["order", "--size", "large", "cheese"])
        assert result.exit_code == 0, result.output
        assert seen == {"size": "large", "args": ["cheese"]}

    def test_option_outside_invocation_returns_default(self) -> None:
        cmd = new_command("order", "o", RecordingRunner().run)
        assert cmd.option("size", "small") == "small"


class TestExamples:
    def test_examples_flag(self, cli_runner: CliRunner) -> None:
        runner = RecordingRunner()
        cmd = new_command("order", "o", runner.run, examples="  apizza order large")
        result = cli_runner.invoke(_tree(cmd), ["order", "--examples"])
        assert result.exit_code == 0
        assert "apizza order large" in result.output
        assert runner.calls == []

    def test_group_examples_flag(self, cli_runner: CliRunner) -> None:
        group = ApizzaGroup("root", examples="  apizza version")
        result = cli_runner.invoke(group, ["--examples"])
        assert result.exit_code == 0
        assert "apizza version" in result.output
