import io
import json

import pytest

from pingrunner.cli import EXIT_AUTH, EXIT_FAILED, EXIT_UNKNOWN_OPERATION, parse_args, run
from pingrunner.src.dispatcher import ApiDispatcher, build_registry
from pingrunner.src.services.client_credentials import TokenStore
from pingrunner.src.services.request_executor import RequestExecutor
from pingrunner.src.services.retry_controller import RetryController
from tests.helpers.fakes import FakeIssuer, FakeResponse, FakeSession


def _dispatcher(clock, responses, issuer=None):
    controller = RetryController(
        TokenStore(clock=clock),
        issuer or FakeIssuer(clock),
        RequestExecutor(session=FakeSession(responses)),
        api_key="k",
    )
    return ApiDispatcher(build_registry(controller, host="https://api.test", endpoint="/x", think_time=0))


def test_parse_args():
    args = parse_args(["POST_Request", "--iterations", "3"])
    assert args.operation == "POST_Request"
    assert args.iterations == 3


def test_run_prints_one_outcome_per_iteration(clock):
    out = io.StringIO()
    code = run(_dispatcher(clock, [FakeResponse(200)]), "GET_Request", iterations=2, out=out)
    lines = [json.loads(line) for line in out.getvalue().splitlines()]
    assert code == 0
    assert len(lines) == 2
    assert all(line["passed"] for line in lines)


def test_run_reports_failure(clock):
    out = io.StringIO()
    code = run(_dispatcher(clock, [FakeResponse(200), FakeResponse(500)]), "GET_Request", iterations=2, out=out)
    assert code == EXIT_FAILED


def test_run_unknown_operation(clock):
    assert run(_dispatcher(clock, [FakeResponse(200)]), "bogus", out=io.StringIO()) == EXIT_UNKNOWN_OPERATION


def test_run_auth_failure(clock):
    dispatcher = _dispatcher(clock, [FakeResponse(200)], issuer=FakeIssuer(clock, fail=True))
    assert run(dispatcher, "GET_Request", out=io.StringIO()) == EXIT_AUTH


@pytest.mark.parametrize("value", ["0", "-2"])
def test_parse_args_rejects_non_positive_iterations(value):
    with pytest.raises(SystemExit):
        parse_args(["GET_Request", "--iterations", value])


def test_run_writes_to_current_stdout(clock, capsys):
    code = run(_dispatcher(clock, [FakeResponse(204)]), "GET_Request")
    assert code == 0
    assert json.loads(capsys.readouterr().out)["status_code"] == 204
