"""Unit tests for the evaluation API."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from limbint import __version__
import limbint.api.endpoints as endpoints_module
from limbint.api.endpoints import get_config
from limbint.api.main import app
from limbint.config import DEFAULT_CONFIG, ServiceConfig


@pytest.fixture
def client():
    """Create a test client for the API."""
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        """Health reports status and version."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


class TestEvaluate:
    """Tests for successful evaluations."""

    def test_add(self, client):
        """Adds two decimal operands."""
        response = client.post(
            "/evaluate",
            json={"op": "add", "lhs": "123456789123456789", "rhs": "1"},
        )
        assert response.status_code == 200
        assert response.json() == {"op": "add", "result": "123456789123456790"}

    def test_int_operands(self, client):
        """JSON integers are accepted as operands."""
        response = client.post("/evaluate", json={"op": "mul", "lhs": -6, "rhs": 7})
        assert response.status_code == 200
        assert response.json()["result"] == "-42"

    def test_divmod_includes_remainder(self, client):
        """divmod returns the remainder field."""
        response = client.post("/evaluate", json={"op": "divmod", "lhs": "-7", "rhs": "3"})
        assert response.status_code == 200
        assert response.json() == {"op": "divmod", "result": "-2", "remainder": "-1"}

    def test_unary(self, client):
        """Unary operations need no rhs."""
        response = client.post("/evaluate", json={"op": "invert", "lhs": "0"})
        assert response.status_code == 200
        assert response.json()["result"] == "-1"

    def test_shift(self, client):
        """Shift amounts come from rhs."""
        response = client.post("/evaluate", json={"op": "shl", "lhs": "1", "rhs": "64"})
        assert response.json()["result"] == "18446744073709551616"

    def test_result_may_exceed_operand_limit(self, client):
        """Results are not bound by the operand digit limit."""
        lhs = "9" * (DEFAULT_CONFIG.max_digits // 2 + 1)
        response = client.post("/evaluate", json={"op": "mul", "lhs": lhs, "rhs": lhs})
        assert response.status_code == 200
        assert len(response.json()["result"]) > DEFAULT_CONFIG.max_digits

    def test_evaluation_runs_off_event_loop(self, client, monkeypatch):
        """Arithmetic runs in a worker thread, not on the event loop."""
        loop_running = []
        original = endpoints_module.evaluate

        def recording_evaluate(*args, **kwargs):
            try:
                asyncio.get_running_loop()
                loop_running.append(True)
            except RuntimeError:
                loop_running.append(False)
            return original(*args, **kwargs)

        monkeypatch.setattr(endpoints_module, "evaluate", recording_evaluate)
        response = client.post("/evaluate", json={"op": "mul", "lhs": "12345", "rhs": "-2"})
        assert response.status_code == 200
        assert response.json()["result"] == "-24690"
        assert loop_running == [False]


class TestEvaluateErrors:
    """Tests for rejected evaluations."""

    def test_division_by_zero(self, client):
        """Division by zero returns 400 with the error message."""
        response = client.post("/evaluate", json={"op": "div", "lhs": "5", "rhs": "0"})
        assert response.status_code == 400
        assert "Division by zero" in response.json()["detail"]

    def test_modulo_by_zero(self, client):
        """Modulo by zero returns 400."""
        response = client.post("/evaluate", json={"op": "mod", "lhs": "5", "rhs": "0"})
        assert response.status_code == 400

    @pytest.mark.parametrize("lhs", ["", "-", "12a3", "--5"])
    def test_invalid_operand(self, client, lhs):
        """Malformed decimal strings return 422."""
        response = client.post("/evaluate", json={"op": "add", "lhs": lhs, "rhs": "1"})
        assert response.status_code == 422

    def test_operand_too_long(self, client):
        """Operands over the digit limit return 422."""
        lhs = "1" * (DEFAULT_CONFIG.max_digits + 1)
        response = client.post("/evaluate", json={"op": "add", "lhs": lhs, "rhs": "1"})
        assert response.status_code == 422

    def test_operand_limit_from_injected_config(self, client):
        """The digit limit follows the get_config override."""
        app.dependency_overrides[get_config] = lambda: ServiceConfig(max_digits=5)
        response = client.post("/evaluate", json={"op": "neg", "lhs": "123456789"})
        assert response.status_code == 422
        assert "limit is 5" in response.json()["detail"]

        response = client.post("/evaluate", json={"op": "add", "lhs": "12345", "rhs": "-123456"})
        assert response.status_code == 422
        assert "'rhs'" in response.json()["detail"]

        response = client.post("/evaluate", json={"op": "add", "lhs": "12345", "rhs": "1"})
        assert response.status_code == 200

    def test_unknown_op(self, client):
        """Unknown operation names return 422."""
        response = client.post("/evaluate", json={"op": "pow", "lhs": "2", "rhs": "3"})
        assert response.status_code == 422

    def test_missing_rhs(self, client):
        """Binary operations without rhs return 422."""
        response = client.post("/evaluate", json={"op": "add", "lhs": "2"})
        assert response.status_code == 422
        assert "requires a right operand" in response.json()["detail"]

    def test_unary_with_rhs(self, client):
        """Unary operations with an rhs return 422."""
        response = client.post("/evaluate", json={"op": "neg", "lhs": "1", "rhs": "5"})
        assert response.status_code == 422
        assert "takes no right operand" in response.json()["detail"]

    def test_shift_over_limit(self, client):
        """Shift amounts beyond the configured limit return 422."""
        app.dependency_overrides[get_config] = lambda: ServiceConfig(max_shift=8)
        response = client.post("/evaluate", json={"op": "shl", "lhs": "1", "rhs": "9"})
        assert response.status_code == 422

    def test_request_too_large(self, client):
        """Bodies over the size limit return 413."""
        response = client.post(
            "/evaluate",
            json={"op": "add", "lhs": "1", "rhs": "1"},
            headers={"Content-Length": str(DEFAULT_CONFIG.max_request_size + 1)},
        )
        assert response.status_code == 413
        assert response.json()["detail"] == "Request too large"

    def test_request_size_from_injected_config(self, client):
        """The body size limit follows the get_config override."""
        app.dependency_overrides[get_config] = lambda: ServiceConfig(max_request_size=16)
        response = client.post("/evaluate", json={"op": "add", "lhs": "1", "rhs": "1"})
        assert response.status_code == 413
        assert response.json()["detail"] == "Request too large"
