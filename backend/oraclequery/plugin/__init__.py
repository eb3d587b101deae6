"""
Host plugin surface: template tags, Jinja2 extension, listener lifecycle.
"""

from oraclequery.plugin.template_tags import (
    ORACLE_OPERATION_TAG,
    ORACLE_QUERY_TAG,
    TEMPLATE_TAGS,
    TemplateTag,
    TemplateTagArg,
)

__all__ = [
    "ORACLE_OPERATION_TAG",
    "ORACLE_QUERY_TAG",
    "TEMPLATE_TAGS",
    "TemplateTag",
    "TemplateTagArg",
]
