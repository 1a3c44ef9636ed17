"""One-shot entrypoint: parse and evaluate a whole script from scratch."""

from __future__ import annotations

from vecscript.parser import ParsedScript, ParseMode, ParserOptions, parse_script
from vecscript.pipeline.result import ScriptRunResult
from vecscript.runtime import Runtime


def run_script(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: ParsedScript | None = None,
) -> ScriptRunResult:
    """Parse `text` and run it on a fresh runtime; nothing carries over from earlier runs."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    runtime = Runtime()
    execution = runtime.run(resolved_parse.instructions)
    return ScriptRunResult(parse=resolved_parse, runtime=runtime, execution=execution)


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: ParsedScript | None,
) -> ParsedScript:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_script(text, options=options, mode=mode)
