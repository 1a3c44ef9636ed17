"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling line filtering and unmatched-line reporting."""

    mode: ParseMode = ParseMode.PERMISSIVE
    comment_prefix: str = "//"
    report_unmatched_lines: bool = False

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(mode=mode, report_unmatched_lines=True)

        return ParserOptions(mode=mode, report_unmatched_lines=False)
