"""Tests for the {% oracle_operation %} Jinja2 tag."""

import json
from unittest.mock import patch

import pytest
from jinja2 import Environment, TemplateSyntaxError

from oraclequery.core.errors import ParameterParseError
from oraclequery.plugin.extensions import OracleOperationExtension
from tests.utils.cursor import make_cursor


def _env() -> Environment:
    return Environment(extensions=[OracleOperationExtension])


@patch("oraclequery.engines.sql.executor.execute")
@patch("oraclequery.engines.sql.executor.connect")
def test_renders_result_json(mock_connect, mock_execute) -> None:
    mock_execute.return_value = make_cursor(["N"], [(1,)])
    tpl = _env().from_string(
        "{% oracle_operation user, pwd, dsn, 'SELECT 1 AS n FROM dual' %}"
    )

    out = tpl.render(user="scott", pwd="tiger", dsn="localhost:1521/FREEPDB1")

    assert json.loads(out) == {"operation": "SELECT", "rows": [{"N": 1}], "rowCount": 1}
    mock_connect.assert_called_once_with("scott", "tiger", "localhost:1521/FREEPDB1")


@patch("oraclequery.engines.sql.executor.execute")
@patch("oraclequery.engines.sql.executor.connect")
def test_params_argument(mock_connect, mock_execute) -> None:
    mock_execute.return_value = make_cursor(rowcount=5)
    tpl = _env().from_string(
        "{% oracle_operation 'u', 'p', 'h:1521/s', 'DELETE FROM t WHERE a = :a', params %}"
    )

    out = tpl.render(params='{"a": 1}')

    assert json.loads(out)["rowCount"] == 5
    mock_execute.assert_called_once_with(
        mock_connect.return_value, "DELETE FROM t WHERE a = :a", {"a": 1}
    )


def test_wrong_arity_is_a_syntax_error() -> None:
    with pytest.raises(TemplateSyntaxError, match="oracle_operation expects"):
        _env().from_string("{% oracle_operation 'u', 'p' %}")


@patch("oraclequery.engines.sql.executor.connect")
def test_non_text_params_rejected_before_connecting(mock_connect) -> None:
    tpl = _env().from_string("{% oracle_operation 'u', 'p', 'h:1521/s', 'SELECT 1 FROM dual', 5 %}")

    with pytest.raises(ParameterParseError):
        tpl.render()
    assert mock_connect.call_count == 0
