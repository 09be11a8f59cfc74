import importlib

from click.testing import CliRunner

from conftest import FakeTransport, card_responses
from tachoid.core.errors import IoFailureError, NoCardError, ReaderUnavailableError
from tachoid.scripts import tachoid

session_module = importlib.import_module("tachoid.app.tacho.session")
main_module = importlib.import_module("tachoid.app.main")


class FakeCard:
    """Stands in for the pyscard-backed Card."""

    readers = ["Reader 0"]
    transport = None
    connect_error = None
    disconnect_error = None
    disconnected = False

    @classmethod
    def list_readers(cls):
        return cls.readers

    def connect(self, reader):
        if FakeCard.connect_error is not None:
            raise FakeCard.connect_error

    def disconnect(self):
        FakeCard.disconnected = True
        if FakeCard.disconnect_error is not None:
            raise FakeCard.disconnect_error

    def get_atr(self):
        return b"\x3B\x9F"

    def transmit(self, command):
        return FakeCard.transport.transmit(command)


def _install(monkeypatch, responses, connect_error=None, readers=("Reader 0",)):
    monkeypatch.setattr(FakeCard, "transport", FakeTransport(responses))
    monkeypatch.setattr(FakeCard, "connect_error", connect_error)
    monkeypatch.setattr(FakeCard, "readers", list(readers))
    monkeypatch.setattr(FakeCard, "disconnected", False)
    monkeypatch.setattr(FakeCard, "disconnect_error", None)
    monkeypatch.setattr(session_module, "Card", FakeCard)


def test_session_prints_identity(monkeypatch, capsys):
    _install(monkeypatch, card_responses())
    assert session_module.session() is True
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Driver card number: 1234567890123456",
        "First name: JOHN",
        "Last name: DOE",
        "Year: 1985",
        "month: 03",
        "day: 15",
        "Preferred language: en",
    ]
    assert FakeCard.disconnected


def test_session_disconnect_failure_keeps_result(monkeypatch, capsys, caplog):
    _install(monkeypatch, card_responses())
    monkeypatch.setattr(FakeCard, "disconnect_error", IoFailureError("failed to disconnect: reset"))
    assert session_module.session() is True
    out = capsys.readouterr().out
    assert "Driver card number: 1234567890123456" in out
    assert "failed to disconnect" in caplog.text


def test_session_no_card(monkeypatch, capsys, caplog):
    _install(monkeypatch, [], connect_error=NoCardError("no card"))
    assert session_module.session() is False
    assert capsys.readouterr().out == ""
    assert "A smartcard is not present in the reader" in caplog.text
    assert FakeCard.disconnected


def test_session_no_readers(monkeypatch, caplog):
    _install(monkeypatch, [], readers=())
    assert session_module.session() is False
    assert "No readers are connected" in caplog.text


def test_session_status_error(monkeypatch, caplog):
    _install(monkeypatch, [b"\x6A\x82"])
    assert session_module.session() is False
    assert "SW=6A82" in caplog.text
    assert "select DF" in caplog.text


def test_list_readers(monkeypatch, capsys):
    _install(monkeypatch, [], readers=("ACS ACR38U 00", "Identiv uTrust 01"))
    assert session_module.list_readers() is True
    assert capsys.readouterr().out.splitlines() == [
        "  0. ACS ACR38U 00",
        "  1. Identiv uTrust 01",
    ]


def test_list_readers_service_down(monkeypatch):
    def unavailable():
        raise ReaderUnavailableError("PC/SC service unavailable")

    _install(monkeypatch, [])
    monkeypatch.setattr(FakeCard, "list_readers", staticmethod(unavailable))
    assert session_module.list_readers() is False


def test_cli_passes_options(monkeypatch):
    calls = []

    def fake_main(**kwargs):
        calls.append(kwargs)
        return True

    monkeypatch.setattr(main_module, "main", fake_main)
    result = CliRunner().invoke(tachoid, ["-g", "2", "--lenient", "-r", "acr", "-e", "latin-1"])
    assert result.exit_code == 0
    assert calls == [{
        "reader": "acr",
        "generation": 2,
        "lenient": True,
        "encoding": "iso8859-1",
        "list_only": False,
    }]


def test_cli_exit_status_on_failure(monkeypatch):
    monkeypatch.setattr(main_module, "main", lambda **kwargs: False)
    result = CliRunner().invoke(tachoid, [])
    assert result.exit_code == 1


def test_cli_rejects_multibyte_encoding():
    result = CliRunner().invoke(tachoid, ["-e", "utf-8"])
    assert result.exit_code == 2
    assert "single-byte" in result.output


def test_cli_end_to_end(monkeypatch):
    _install(monkeypatch, card_responses())
    result = CliRunner().invoke(tachoid, [])
    assert result.exit_code == 0
    assert "Driver card number: 1234567890123456" in result.output
    assert "Preferred language: en" in result.output


def test_cli_rejects_codec_without_replace_handler():
    result = CliRunner().invoke(tachoid, ["-e", "idna"])
    assert result.exit_code == 2
    assert "idna" in result.output
