import json

import pytest

from kappa.interpreter import Interpreter
from kappa_lsp.repl_server import ReplServer


@pytest.fixture
def server(monkeypatch):
    monkeypatch.delenv("KAPPA_REPL_HOST", raising=False)
    monkeypatch.delenv("KAPPA_REPL_PORT", raising=False)
    return ReplServer(host="127.0.0.1", port=0, interp=Interpreter(prelude=None))


def _request(server, **payload):
    return server.handle_request(json.dumps(payload).encode("utf-8"))


def test_eval_returns_printed_results(server):
    resp = _request(server, cmd="eval", code="(defun f (x) x) (f 1)")
    assert resp == {"ok": True, "result": "f\n1"}


def test_session_persists_between_requests(server):
    _request(server, cmd="eval", code="(defun sq (x) (* x x))")
    assert _request(server, cmd="eval", code="(sq 1.5)") == {"ok": True, "result": "2.25"}


def test_empty_code(server):
    assert _request(server, cmd="eval", code="") == {"ok": True, "result": ""}


def test_evaluation_error(server):
    resp = _request(server, cmd="eval", code="(/ 1 0)")
    assert resp == {"ok": False, "error": "division by zero"}


def test_syntax_error(server):
    resp = _request(server, cmd="eval", code="(+ 1")
    assert resp["ok"] is False
    assert resp["error"].startswith("expected ')'")


def test_unknown_command(server):
    assert _request(server, cmd="load") == {"ok": False, "error": "Unknown cmd: load"}


@pytest.mark.parametrize("line", [b"not json", b"[1, 2]", b"\xff\xfe"])
def test_invalid_requests(server, line):
    resp = server.handle_request(line)
    assert resp["ok"] is False
    assert resp["error"].startswith("Invalid request")


def test_code_must_be_a_string(server):
    resp = _request(server, cmd="eval", code=42)
    assert resp == {"ok": False, "error": "Invalid request: code must be a string"}


def test_default_address(monkeypatch):
    monkeypatch.setenv("KAPPA_REPL_PORT", "9100")
    monkeypatch.delenv("KAPPA_REPL_HOST", raising=False)
    srv = ReplServer(interp=Interpreter(prelude=None))
    assert (srv.host, srv.port) == ("127.0.0.1", 9100)
