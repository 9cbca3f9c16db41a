import logging

import pytest

from port_sniffer import main
from port_sniffer.config import USAGE
from port_sniffer.scanner import port_scanner


@pytest.fixture
def open_ports(monkeypatch):
    ports = set()
    monkeypatch.setattr(port_scanner, "probe_port", lambda address, port: port in ports)
    return ports


def test_help_prints_usage_and_never_scans(capsys, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("scan must not start")

    monkeypatch.setattr(port_scanner.PortScanner, "scan", fail)
    assert main.main(["-h"]) == 0
    out, err = capsys.readouterr()
    assert USAGE in out
    assert err == ""


def test_help_with_extra_arguments_is_a_usage_error(capsys, monkeypatch):
    monkeypatch.setattr(port_scanner.PortScanner, "scan", lambda self, address: [])
    assert main.main(["-h", "10.0.0.1"]) == main.EXIT_USAGE
    out, err = capsys.readouterr()
    assert "too many arguments" in err
    assert "problem parsing arguments" in err
    assert out == ""


def test_invalid_address_is_reported(capsys):
    assert main.main(["-j", "4", "300.1.1.1"]) == main.EXIT_USAGE
    _, err = capsys.readouterr()
    assert "not a valid IPADDR" in err


def test_scan_prints_open_ports_in_order(capsys, open_ports):
    open_ports.update({8080, 22})
    assert main.main(["192.0.2.1"]) == 0
    out, _ = capsys.readouterr()
    progress, *report = out.split("\n")
    assert progress == ".."
    assert report == ["22 is open", "8080 is open", ""]


def test_unreachable_target_gives_empty_report(capsys, open_ports):
    assert main.main(["-j", "10", "192.0.2.1"]) == 0
    out, err = capsys.readouterr()
    assert out == "\n"
    assert err == ""


def test_run_exits_with_main_code(monkeypatch):
    monkeypatch.setattr(main, "colorama_init", lambda **kwargs: None)
    monkeypatch.setattr(main, "setup_logger", lambda: None)
    monkeypatch.setattr(main, "main", lambda: 0)
    with pytest.raises(SystemExit) as excinfo:
        main.run()
    assert excinfo.value.code == 0


def test_run_handles_keyboard_interrupt(monkeypatch, capsys):
    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(main, "colorama_init", lambda **kwargs: None)
    monkeypatch.setattr(main, "setup_logger", lambda: None)
    monkeypatch.setattr(main, "main", interrupted)
    with pytest.raises(SystemExit) as excinfo:
        main.run()
    assert excinfo.value.code == main.EXIT_INTERRUPTED
    assert "interrupted" in capsys.readouterr().out


def test_run_reports_fatal_errors(monkeypatch, capsys):
    def broken():
        raise RuntimeError("cannot start thread")

    monkeypatch.setattr(main, "colorama_init", lambda **kwargs: None)
    monkeypatch.setattr(main, "setup_logger", lambda: None)
    monkeypatch.setattr(main, "main", broken)
    with pytest.raises(SystemExit) as excinfo:
        main.run()
    assert excinfo.value.code == main.EXIT_FATAL
    assert "cannot start thread" in capsys.readouterr().err


def test_scan_start_is_logged_once(caplog, capsys, open_ports):
    caplog.set_level(logging.INFO, logger="port_sniffer")
    assert main.main(["-j", "4", "192.0.2.1"]) == 0
    starts = [r for r in caplog.records if "Starting TCP connect scan" in r.getMessage()]
    assert len(starts) == 1
    assert "192.0.2.1" in starts[0].getMessage()
