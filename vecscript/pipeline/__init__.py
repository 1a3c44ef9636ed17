"""Parse + run entrypoints and their result carriers."""

from vecscript.pipeline.entrypoints import run_script
from vecscript.pipeline.result import ScriptRunResult

__all__ = [
    "ScriptRunResult",
    "run_script",
]
