"""Shell completion scripts for the command-line interface.

One script per supported shell is written to the completion directory,
plus a `load` script that sources the right one for the running shell:

    . ./load
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from click.shell_completion import get_completion_class

logger = logging.getLogger(__name__)

SUPPORTED_SHELLS: tuple[str, ...] = ("bash", "zsh", "fish")

LOAD_SCRIPT_TEMPLATE = """\
#!/bin/sh
# Source this file to enable BIN_NAME completion in the current shell.
# fish users: source COMPLETE_DIR/BIN_NAME.fish instead.
if [ -n "$ZSH_VERSION" ]; then
    . "COMPLETE_DIR/BIN_NAME.zsh"
elif [ -n "$BASH_VERSION" ]; then
    . "COMPLETE_DIR/BIN_NAME.bash"
else
    echo "BIN_NAME: unsupported shell, no completion loaded" >&2
fi
"""


def completion_var(prog_name: str) -> str:
    """Environment variable click inspects to serve completions."""
    return f"_{prog_name.replace('-', '_').upper()}_COMPLETE"


def write_completion_scripts(cli: click.Command, complete_dir: Path, prog_name: str) -> list[Path]:
    """Write `<complete_dir>/<prog_name>.<shell>` for every supported shell."""
    complete_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for shell in SUPPORTED_SHELLS:
        comp_cls = get_completion_class(shell)
        if comp_cls is None:
            logger.warning("click has no completion support for %s", shell)
            continue
        source = comp_cls(cli, {}, prog_name, completion_var(prog_name)).source()
        path = complete_dir / f"{prog_name}.{shell}"
        path.write_text(source, encoding="utf-8")
        logger.info("Generated completion file of %s for %s", prog_name, shell)
        written.append(path)
    return written


def render_load_script(complete_dir: Path, prog_name: str) -> str:
    return LOAD_SCRIPT_TEMPLATE.replace("COMPLETE_DIR", complete_dir.name).replace("BIN_NAME", prog_name)


def write_load_script(path: Path, complete_dir: Path, prog_name: str) -> Path:
    """Write the `load` helper script next to the completion directory."""
    path.write_text(render_load_script(complete_dir, prog_name), encoding="utf-8")
    return path
