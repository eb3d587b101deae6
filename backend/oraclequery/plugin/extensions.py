"""
Jinja2 tag for hosts that template with Jinja2.

{% oracle_operation user, password, connect_string, sql [, params] %}
renders the same JSON text as the ``oracle_operation`` template tag.
"""

from typing import Any

from jinja2 import nodes
from jinja2.ext import Extension

from oraclequery.plugin import template_tags


class OracleOperationExtension(Extension):
    tags = {"oracle_operation"}

    def parse(self, parser) -> nodes.Output:
        lineno = next(parser.stream).lineno
        args = [parser.parse_expression()]
        while parser.stream.skip_if("comma"):
            args.append(parser.parse_expression())
        if len(args) not in (4, 5):
            parser.fail(
                "oracle_operation expects user, password, connect_string, sql [, params]",
                lineno,
            )
        return nodes.Output([self.call_method("_run", args)]).set_lineno(lineno)

    def _run(self, *args: Any) -> str:
        return template_tags.run_oracle_operation(None, *args)


# List of extensions to pass to Jinja2 Environment
TEMPLATE_TAG_EXTENSIONS: list[type[Extension]] = [OracleOperationExtension]
