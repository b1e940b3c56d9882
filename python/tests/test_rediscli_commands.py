"""Unit tests for rediscli commands."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(REPO_ROOT / "python"))

from rediscli.commands import build_registry
from rediscli.commands.clear import ClearCommand
from rediscli.commands.connect import ConnectCommand
from rediscli.commands.exit import ExitCommand
from rediscli.commands.mode import ModeCommand
from rediscli.commands.store import StoreCommand
from rediscli.reply import Blob, ErrorValue, Integer, Mode, Sequence
from rediscli.transport import TransportError


def test_registry_matches_case_insensitively():
    registry = build_registry()
    assert registry.get("HELP") is registry.get("?")
    assert registry.get("Quit") is registry.get("exit")
    assert registry.get("get") is None


def test_mode_switches_rendering(ctx, factory, capsys):
    store = StoreCommand()
    mode = ModeCommand()
    assert mode.run(ctx, ["raw"]) == 0
    factory.replies = [Integer(5)]
    store.run(ctx, ["incr", "counter"])
    assert capsys.readouterr().out.splitlines()[-1] == "5"
    assert mode.run(ctx, ["STD"]) == 0
    ctx.transport.replies.append(Integer(5))
    store.run(ctx, ["incr", "counter"])
    assert capsys.readouterr().out.splitlines()[-1] == "(integer) 5"


@pytest.mark.parametrize("argv", [["foo"], [], ["raw", "std"]])
def test_mode_rejects_bad_arguments(ctx, capsys, argv):
    ctx.mode = Mode.RAW
    assert ModeCommand().run(ctx, argv) == 1
    assert ctx.mode is Mode.RAW
    assert "Should be MODE [raw|std]" in capsys.readouterr().out


def test_help_without_topic_prints_usage(ctx, capsys):
    registry = build_registry()
    assert registry.get("help").run(ctx, []) == 0
    out = capsys.readouterr().out
    assert '"help <command>"' in out
    assert "connect" in out


def test_help_topic_prints_usage_and_group(ctx, capsys):
    registry = build_registry()
    assert registry.get("help").run(ctx, ["get"]) == 0
    out = capsys.readouterr().out
    assert "\tGET key \n" in out
    assert "\tGroup: string \n" in out


def test_help_unknown_topic_prints_nothing(ctx, capsys):
    registry = build_registry()
    registry.get("help").run(ctx, ["nosuchcommand"])
    assert capsys.readouterr().out == ""


def test_help_with_many_arguments_prints_blank_line(ctx, capsys):
    registry = build_registry()
    registry.get("help").run(ctx, ["get", "set"])
    assert capsys.readouterr().out == "\n"


def test_clear_prints_hint(ctx, capsys):
    assert ClearCommand().run(ctx, []) == 0
    assert "Ctrl + L" in capsys.readouterr().out


def test_exit_raises_system_exit(ctx, factory):
    ctx.ensure_transport()
    with pytest.raises(SystemExit) as excinfo:
        ExitCommand().run(ctx, [])
    assert excinfo.value.code == 0
    assert factory.created[0].closed


def test_connect_requires_host_and_port(ctx, factory, capsys):
    assert ConnectCommand().run(ctx, ["onlyhost"]) == 1
    assert factory.created == []
    assert "At least provides host and port" in capsys.readouterr().out


def test_connect_adopts_new_transport(ctx, factory, capsys):
    old = ctx.ensure_transport()
    ctx.db = 3
    assert ConnectCommand().run(ctx, ["10.0.0.1", "6380"]) == 0
    new = factory.created[-1]
    assert ctx.transport is new
    assert old.closed
    assert new.pings == 1
    assert (ctx.host, ctx.port, ctx.db) == ("10.0.0.1", "6380", 0)
    assert ctx.prompt == "10.0.0.1:6380> "
    assert "connected 10.0.0.1:6380 successfully" in capsys.readouterr().out


def test_connect_ping_failure_keeps_old_state(ctx, factory, capsys):
    old = ctx.ensure_transport()
    factory.ping_error = "connection refused"
    assert ConnectCommand().run(ctx, ["badhost", "1"]) == 2
    assert ctx.transport is old
    assert not old.closed
    assert factory.created[-1].closed
    assert ctx.host == "127.0.0.1"
    assert "(error) connection refused" in capsys.readouterr().out


def test_connect_auth_failure_does_not_adopt(ctx, factory, capsys):
    old = ctx.ensure_transport()
    factory.auth_error = "WRONGPASS invalid username-password pair"
    assert ConnectCommand().run(ctx, ["h", "1", "pw"]) == 2
    assert ctx.transport is old
    assert factory.created[-1].auths == ["pw"]
    assert "WRONGPASS" in capsys.readouterr().out


def test_connect_with_password_authenticates(ctx, factory):
    assert ConnectCommand().run(ctx, ["h", "1", "pw"]) == 0
    new = factory.created[-1]
    assert new.auths == ["pw"]
    assert new.kwargs["password"] == "pw"
    assert new.commands == []
    assert ctx.password == "pw"


def test_store_sends_tokens_and_renders(ctx, factory, capsys):
    factory.replies = [Sequence((Blob(b"a"), Blob(b"b")))]
    assert StoreCommand().run(ctx, ["lrange", "list", "0", "-1"]) == 0
    transport = factory.created[0]
    assert transport.commands[-1] == ["lrange", "list", "0", "-1"]
    assert capsys.readouterr().out == '1) "a"\n2) "b"\n'


def test_store_transport_error_reported_inline(ctx, factory, capsys):
    factory.replies = [TransportError("Timeout reading from socket")]
    assert StoreCommand().run(ctx, ["get", "foo"]) == 2
    assert capsys.readouterr().out == "(error) Timeout reading from socket\n"


def test_select_updates_db_on_success(ctx, factory):
    ctx.ensure_transport()
    assert StoreCommand().run(ctx, ["select", "3"]) == 0
    assert ctx.db == 3
    assert ctx.prompt == "127.0.0.1:6379[3]> "
    assert ctx.transport.remembered_db == 3


def test_select_error_reply_keeps_db(ctx, factory):
    ctx.ensure_transport()
    ctx.db = 2
    ctx.transport.replies.append(ErrorValue("ERR DB index is out of range"))
    StoreCommand().run(ctx, ["SELECT", "99"])
    assert ctx.db == 2


def test_select_transport_error_keeps_db(ctx, factory):
    ctx.ensure_transport()
    ctx.transport.replies.append(TransportError("broken pipe"))
    StoreCommand().run(ctx, ["select", "3"])
    assert ctx.db == 0
    assert ctx.prompt == "127.0.0.1:6379> "


def test_select_unparsable_index_defaults_to_zero(ctx, factory):
    ctx.ensure_transport()
    ctx.db = 4
    StoreCommand().run(ctx, ["select", "abc"])
    assert ctx.db == 0


def test_info_bypasses_tree_renderer(ctx, factory, capsys):
    ctx.ensure_transport()
    ctx.transport.replies.append(Blob(b"# Server\r\nredis_version:7.2.0"))
    StoreCommand().run(ctx, ["INFO"])
    assert capsys.readouterr().out == "# Server\r\nredis_version:7.2.0\n"


def test_eval_reports_result_size(ctx, factory, capsys):
    ctx.ensure_transport()
    ctx.transport.replies.append(Integer(1))
    StoreCommand().run(ctx, ["eval", "return 1", "0"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "(integer) 1"
    assert lines[1].startswith("Size of result: ")
    assert int(lines[1].split(":")[1]) > 0


def test_script_argument_is_replaced_by_file_content(ctx, factory, tmp_path):
    script = tmp_path / "script.lua"
    script.write_text("return redis.call('get', KEYS[1])", encoding="utf-8")
    ctx.ensure_transport()
    StoreCommand().run(ctx, ["eval", "--script", str(script), "1", "foo"])
    assert ctx.transport.commands[-1] == ["eval", "return redis.call('get', KEYS[1])", "1", "foo"]


def test_script_read_failure_aborts_command(ctx, factory, tmp_path, capsys):
    ctx.ensure_transport()
    sent = len(ctx.transport.commands)
    assert StoreCommand().run(ctx, ["eval", "--script", str(tmp_path / "missing.lua"), "0"]) == 1
    assert len(ctx.transport.commands) == sent
    assert capsys.readouterr().out.startswith("(error) ")


def test_initial_db_selected_on_first_use(factory):
    from rediscli.context import CliContext

    ctx = CliContext(transport_factory=factory, db=5)
    transport = ctx.ensure_transport()
    assert transport.pings == 1
    assert transport.commands == [["SELECT", 5]]
    assert transport.remembered_db == 5


def test_initial_db_out_of_range_falls_back_to_zero(factory, capsys):
    from rediscli.context import CliContext

    ctx = CliContext(transport_factory=factory, db=16)
    transport = ctx.ensure_transport()
    assert transport.commands == []
    assert ctx.db == 0
    assert "index out of range" in capsys.readouterr().out


@pytest.mark.parametrize("db, prompt", [(0, "127.0.0.1:6379> "), (15, "127.0.0.1:6379[15]> "), (16, "127.0.0.1:6379> ")])
def test_prompt_shows_db_only_inside_range(ctx, db, prompt):
    ctx.db = db
    assert ctx.prompt == prompt


def test_prompt_prefers_unix_socket(ctx):
    ctx.unix_socket = "/tmp/redis.sock"
    ctx.db = 1
    assert ctx.prompt == "/tmp/redis.sock[1]> "


def test_raw_mode_writes_binary_values_unchanged(ctx, factory, monkeypatch):
    stream = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    monkeypatch.setattr(sys, "stdout", stream)
    ctx.mode = Mode.RAW
    factory.replies = [Blob(b"\xff\xfe\x00ok")]
    assert StoreCommand().run(ctx, ["get", "bin"]) == 0
    stream.flush()
    assert stream.buffer.getvalue() == b"\xff\xfe\x00ok\n"
