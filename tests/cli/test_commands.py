import argparse
import io
import unittest
import unittest.mock
from contextlib import redirect_stdout

from flynn.cli.commands.api import CMD_PS, CMD_RUN
from flynn.cli.commands.create import run_create
from flynn.cli.commands.help import print_usage, run_help
from flynn.cli.commands.login import run_login
from flynn.cli.registry import COMMANDS
from flynn.lib.context import RuntimeContext
from flynn.lib.core.config import Config, Server, load_config
from flynn.lib.core.errors import FatalError, FlynnError
from test_utils import FakeRemotes, config_env, make_config


def _ctx(config=None, git=None, **kwargs) -> RuntimeContext:
    kwargs.setdefault("env", {})
    return RuntimeContext(config=config or Config(), git=git or FakeRemotes(), **kwargs)


class HelpTests(unittest.TestCase):
    def test_usage_lists_commands_and_extras(self) -> None:
        out = io.StringIO()
        print_usage(COMMANDS, out)
        text = out.getvalue()
        listed, _, extra = text.partition("Additional commands:")
        self.assertIn("login", listed)
        self.assertIn("create a Flynn app", listed)
        self.assertNotIn("domain", listed)
        self.assertIn("domain", extra)
        self.assertNotIn("(extra)", text)

    def test_help_for_command(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            run_help(_ctx(), argparse.Namespace(), ["create"])
        self.assertIn("Usage: flynn create <app>", out.getvalue())
        self.assertIn("Creates a Flynn remote", out.getvalue())

    def test_help_unknown_topic(self) -> None:
        with self.assertRaises(FlynnError):
            run_help(_ctx(), argparse.Namespace(), ["nope"])


class LoginTests(unittest.TestCase):
    def test_appends_server_and_saves(self) -> None:
        existing = "[[Servers]]\nGitHost = \"old.example.com\"\nApiUrl = \"https://old\"\n"
        answers = iter(["git.example.com", "https://api.example.com  ", "key123", "pin456"])
        with config_env(existing) as env:
            config = load_config()
            with (
                unittest.mock.patch("builtins.input", side_effect=lambda prompt: next(answers)),
                redirect_stdout(io.StringIO()),
            ):
                run_login(_ctx(config), argparse.Namespace(), [])
            saved = load_config(env.config_file)

        self.assertEqual(
            saved.servers,
            [
                Server("old.example.com", "https://old"),
                Server("git.example.com", "https://api.example.com", "key123", "pin456"),
            ],
        )

    def test_prompts_in_order(self) -> None:
        prompts = []

        def fake_input(prompt: str) -> str:
            prompts.append(prompt)
            return "value"

        with config_env(""):
            config = load_config()
            with (
                unittest.mock.patch("builtins.input", side_effect=fake_input),
                redirect_stdout(io.StringIO()),
            ):
                run_login(_ctx(config), argparse.Namespace(), [])
        self.assertEqual(prompts, ["Git Host: ", "Api Url: ", "Api Key: ", "Api TLS Pin: "])

    def test_empty_answer_aborts_without_saving(self) -> None:
        with config_env("") as env:
            config = load_config()
            with unittest.mock.patch("builtins.input", return_value="   "):
                with self.assertRaises(FlynnError):
                    run_login(_ctx(config), argparse.Namespace(), [])
            self.assertEqual(env.config_file.read_text(encoding="utf-8"), "")

    def test_eof_aborts(self) -> None:
        with config_env(""):
            with unittest.mock.patch("builtins.input", side_effect=EOFError):
                with self.assertRaises(FlynnError):
                    run_login(_ctx(load_config()), argparse.Namespace(), [])


class CreateTests(unittest.TestCase):
    def test_adds_flynn_remote_for_first_server(self) -> None:
        git = FakeRemotes()
        config = make_config(
            ("git.example.com", "https://api.example.com"),
            ("other.example.com", "https://other"),
        )
        with redirect_stdout(io.StringIO()):
            run_create(_ctx(config, git), argparse.Namespace(), ["demoapp"])
        self.assertEqual(git.added, [("flynn", "git@git.example.com:demoapp")])

    def test_requires_app_argument(self) -> None:
        git = FakeRemotes()
        config = make_config(("git.example.com", "https://api.example.com"))
        with self.assertRaises(FlynnError):
            run_create(_ctx(config, git), argparse.Namespace(), [])
        self.assertEqual(git.added, [])

    def test_requires_a_server(self) -> None:
        with self.assertRaises(FlynnError):
            run_create(_ctx(), argparse.Namespace(), ["demoapp"])

    def test_created_remote_resolves_app(self) -> None:
        git = FakeRemotes()
        config = make_config(("git.example.com", "https://api.example.com"))
        ctx = _ctx(config, git)
        with redirect_stdout(io.StringIO()):
            run_create(ctx, argparse.Namespace(), ["demoapp"])
        self.assertEqual(ctx.resolve_app(), "demoapp")


class ApiCommandTests(unittest.TestCase):
    def test_requires_app(self) -> None:
        opts, args = CMD_PS.parse([])
        with self.assertRaises(FatalError):
            CMD_PS.run(_ctx(), opts, args)

    def test_reports_resolved_target(self) -> None:
        opts, args = CMD_RUN.parse(["-d", "bash"])
        ctx = _ctx(flag_app="demoapp", api_url="https://api.example.com")
        with self.assertRaises(FlynnError) as exc:
            CMD_RUN.run(ctx, opts, args)
        self.assertIn("demoapp", str(exc.exception))
        self.assertIn("https://api.example.com", str(exc.exception))
