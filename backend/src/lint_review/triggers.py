from __future__ import annotations


SKIP_MARKERS = ("[review skip]", "[no review]", "[skip review]")

HANDLED_ACTIONS = frozenset({"opened", "synchronize"})


def should_be_skipped(body: str | None) -> bool:
    """Return True when the pull-request body opts out of review (case-sensitive)."""
    if not body:
        return False
    return any(marker in body for marker in SKIP_MARKERS)


def is_handled_action(action: str | None) -> bool:
    return action in HANDLED_ACTIONS
