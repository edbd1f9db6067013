from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Finding(BaseModel):
    """One ESLint message, validated from the `--format json` report."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # ESLint reports ruleId=null for fatal parse errors.
    rule_id: str | None = Field(default=None, alias="ruleId")
    severity: int
    message: str
    line: int | None = None
    column: int | None = None
    end_line: int | None = Field(default=None, alias="endLine")
    end_column: int | None = Field(default=None, alias="endColumn")
    node_type: str | None = Field(default=None, alias="nodeType")
    message_id: str | None = Field(default=None, alias="messageId")


class FileResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_path: str = Field(alias="filePath")
    messages: tuple[Finding, ...] = ()
