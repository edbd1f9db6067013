from lint_review.formatting.annotations import (
    Annotation,
    MessagePolicy,
    build_annotations,
    count_findings,
    normalize_filename,
)
from lint_review.formatting.rule_urls import format_rule_message, rule_url

__all__ = [
    "Annotation",
    "MessagePolicy",
    "build_annotations",
    "count_findings",
    "format_rule_message",
    "normalize_filename",
    "rule_url",
]
