"""Tests for ChatRunner class."""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from sortium.cli.chat_runner import ChatConfig, ChatRunner, ConsoleMessageSink
from sortium.core.errors import CredentialsError, DialogLookupError, TemplateError
from sortium.dm.engine import DialogEngine
from tests.mocks import ScriptedClassifier

DIALOG = """
- id: start
  text: Hi
  options:
    - option: Buy
      next_id: catalog
    - option: Leave
      next_id: exit
- id: catalog
  text: Pick one
  options:
    - option: "[bold]Book[/]"
      next_id: exit
"""

TEMPLATE = "{decision_prompt}\n{option_list}\n{user_response}\n"


@pytest.fixture
def files(tmp_path):
    (tmp_path / "dialog.yaml").write_text(DIALOG)
    (tmp_path / "prompt_decision_template.yaml").write_text(TEMPLATE)
    (tmp_path / "sortium.yaml").write_text("settings:\n  logging:\n    file: null\n")
    return tmp_path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("sortium.cli.chat_runner.setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("sortium.cli.chat_runner.load_dotenv"):
        yield


class TestChatRunnerSetup:
    def test_init_stores_config(self, files, console):
        config = ChatConfig(settings_path=files)
        runner = ChatRunner(config, console=console)
        assert runner.config == config
        assert runner.engine is None

    def test_setup_builds_engine(self, files, console):
        runner = ChatRunner(ChatConfig(settings_path=files), console=console)

        engine = runner.setup(classifier=ScriptedClassifier())

        assert isinstance(engine, DialogEngine)
        assert engine.current_id == "start"
        assert "catalog" in engine.graph

    def test_setup_configures_logging_from_settings(self, files, console, no_logging_setup):
        runner = ChatRunner(ChatConfig(settings_path=files, debug=True), console=console)

        runner.setup(classifier=ScriptedClassifier())

        no_logging_setup.assert_called_once_with("DEBUG", None)

    def test_cli_paths_override_settings(self, files, tmp_path_factory, console):
        other = tmp_path_factory.mktemp("other")
        (other / "custom.yaml").write_text("- id: start\n  text: Custom\n")
        runner = ChatRunner(
            ChatConfig(settings_path=files, dialog_path=other / "custom.yaml"), console=console
        )

        engine = runner.setup(classifier=ScriptedClassifier())

        assert engine.graph.lookup("start").text == "Custom"

    def test_model_override(self, files, console):
        runner = ChatRunner(ChatConfig(settings_path=files, model="other-model"), console=console)

        settings = runner.load_settings()

        assert settings.settings.classifier.model == "other-model"

    def test_missing_dialog_fails_before_run(self, tmp_path, console):
        (tmp_path / "prompt_decision_template.yaml").write_text(TEMPLATE)
        runner = ChatRunner(ChatConfig(settings_path=None), console=console)
        runner.config.template_path = tmp_path / "prompt_decision_template.yaml"
        runner.config.dialog_path = tmp_path / "absent.yaml"

        with pytest.raises(FileNotFoundError):
            runner.setup(classifier=ScriptedClassifier())

    def test_bad_template_fails_before_run(self, files, console):
        (files / "prompt_decision_template.yaml").write_text("{decision_prompt} only")
        runner = ChatRunner(ChatConfig(settings_path=files), console=console)

        with pytest.raises(TemplateError):
            runner.setup(classifier=ScriptedClassifier())

    def test_missing_credential_fails_before_run(self, files, console, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        runner = ChatRunner(ChatConfig(settings_path=files), console=console)

        with pytest.raises(CredentialsError):
            runner.setup()


class TestChatRunnerStart:
    def test_conversation_runs_to_exit(self, files, console):
        runner = ChatRunner(ChatConfig(settings_path=files), console=console)
        runner.setup(classifier=ScriptedClassifier(["Maybe", "Buy", "[bold]Book[/]"]))

        with patch.object(runner, "read_line", side_effect=["hmm", "buy", "the book"]):
            runner.engine.read_input = runner.read_line
            runner.start()

        output = console.file.getvalue()
        assert "Sortium: Hi" in output
        assert "- Buy" in output
        assert "I'm sorry, I didn't understand your response." in output
        assert "- [bold]Book[/]" in output
        assert output.rstrip().endswith("Sortium: Thank you for using the dialog system.")

    def test_eof_ends_quietly(self, files, console):
        runner = ChatRunner(ChatConfig(settings_path=files), console=console)
        runner.setup(classifier=ScriptedClassifier())
        runner.engine.read_input = lambda: (_ for _ in ()).throw(EOFError)

        runner.start()

        assert "Goodbye!" in console.file.getvalue()

    def test_lookup_failure_apologises_and_raises(self, files, console):
        runner = ChatRunner(ChatConfig(settings_path=files), console=console)
        runner.setup(classifier=ScriptedClassifier())
        runner.engine.current_id = "corrupt"

        with pytest.raises(DialogLookupError):
            runner.start()

        assert "Sortium: Oops, something went wrong. Please try again." in console.file.getvalue()


class TestConsoleMessageSink:
    def test_prints_text_without_markup(self, console):
        sink = ConsoleMessageSink(console)

        sink.send("- [red]literal[/]")

        assert console.file.getvalue() == "- [red]literal[/]\n"
