from __future__ import annotations

from typing import Any


def escape_data(value: Any) -> str:
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: Any) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: Any = "", properties: dict[str, Any] | None = None) -> str:
    """Render a GitHub Actions workflow command, e.g. `::warning file=a.ts,line=3::msg`.

    Properties whose value is None are omitted.
    """
    rendered = ""
    if properties:
        pairs = [f"{key}={escape_property(value)}" for key, value in properties.items() if value is not None]
        if pairs:
            rendered = " " + ",".join(pairs)
    return f"::{command}{rendered}::{escape_data(message)}"
