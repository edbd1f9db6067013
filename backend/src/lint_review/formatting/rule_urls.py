from __future__ import annotations


ESLINT_CORE_RULE_URL = "https://eslint.org/docs/rules/{rule}"

# Plugin namespace -> documentation URL template for a rule id inside that plugin.
PLUGIN_RULE_URLS: dict[str, str] = {
    "jest": "https://github.com/jest-community/eslint-plugin-jest/blob/main/docs/rules/{rule}.md",
    "testing-library": (
        "https://github.com/testing-library/eslint-plugin-testing-library/blob/main/docs/rules/{rule}.md"
    ),
    "@typescript-eslint": (
        "https://github.com/typescript-eslint/typescript-eslint/blob/main/packages/eslint-plugin/docs/rules/{rule}.md"
    ),
}

NO_RULE_INFORMATION = "No further rule information available."


def rule_url(rule_id: str | None) -> str | None:
    """Map an ESLint rule id to its documentation page, or None when unknown."""
    if not rule_id:
        return None

    namespace, sep, rule = rule_id.partition("/")
    if not sep:
        return ESLINT_CORE_RULE_URL.format(rule=rule_id)

    template = PLUGIN_RULE_URLS.get(namespace)
    if template is None:
        return None
    return template.format(rule=rule)


def format_rule_message(rule_id: str | None) -> str:
    url = rule_url(rule_id)
    return f"See {url} for details." if url else NO_RULE_INFORMATION
