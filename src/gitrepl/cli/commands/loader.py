"""
Command loader - imports the builtin verbs and any user commands.

Built-in commands ship as packages under ``builtins/``. Extra verbs can be
dropped into ~/.gitrepl/commands/, either as a single module or as a
package directory. Either form registers itself on import:

    # ~/.gitrepl/commands/sync.py
    from gitrepl.cli.commands import command_registry

    @command_registry.register("sync", "Pull then push", group="Git")
    def cmd_sync(ctx, args):
        print(ctx.repo.pull())
        print(ctx.repo.push())

User commands load after builtins, so a user command with a builtin's
name replaces it.
"""

from __future__ import annotations

import logging
import pkgutil
import sys
from importlib import import_module
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType

from gitrepl.config import GITREPL_DIR
from gitrepl.core.exceptions import CommandLoadError

logger = logging.getLogger(__name__)

# Default user commands directory
USER_COMMANDS_DIR = GITREPL_DIR / "commands"

# Package builtins directory
PACKAGE_BUILTINS_DIR = Path(__file__).parent / "builtins"

# sys.modules namespace for user commands
USER_MODULE_PREFIX = "gitrepl_user_commands"

_loaded_builtins = False


def builtin_names() -> list[str]:
    """Names of the builtin command packages, sorted."""
    return sorted(
        info.name for info in pkgutil.iter_modules([str(PACKAGE_BUILTINS_DIR)]) if info.ispkg
    )


def find_user_commands(commands_dir: Path) -> dict[str, Path]:
    """Map command module names to the file that defines them.

    ``name.py`` and ``name/__init__.py`` are both accepted; the package wins
    when both exist. Names starting with ``.`` or ``_`` are ignored.
    """
    if not commands_dir.exists():
        return {}
    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return {}

    found: dict[str, Path] = {}
    for entry in sorted(commands_dir.iterdir()):
        if entry.name.startswith((".", "_")):
            continue
        if entry.is_dir():
            init_file = entry / "__init__.py"
            if init_file.is_file():
                found[entry.name] = init_file
            else:
                logger.debug(f"Skipping {entry.name}: no __init__.py")
        elif entry.suffix == ".py":
            found.setdefault(entry.stem, entry)
    return found


def load_command(name: str, path: Path) -> ModuleType:
    """Import one user command module from path.

    Raises:
        CommandLoadError: If the module can't be created or fails on import.
    """
    module_name = f"{USER_MODULE_PREFIX}.{name}"
    spec = spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise CommandLoadError(name, f"not an importable module: {path}")

    module = module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except SyntaxError as e:
        sys.modules.pop(module_name, None)
        raise CommandLoadError(name, f"syntax error at line {e.lineno}: {e.msg}") from e
    except Exception as e:
        sys.modules.pop(module_name, None)
        raise CommandLoadError(name, f"{type(e).__name__}: {e}") from e
    return module


def load_builtin_commands() -> int:
    """Import every package builtin once.

    Returns:
        Number of builtins imported by this call.
    """
    global _loaded_builtins
    if _loaded_builtins:
        return 0

    count = 0
    for name in builtin_names():
        try:
            import_module(f"gitrepl.cli.commands.builtins.{name}")
            count += 1
        except ImportError as e:
            logger.warning(f"Failed to load builtin command '{name}': {e}")
    _loaded_builtins = True
    return count


def load_all_commands(user_dir: Path | None = None, verbose: bool = False) -> int:
    """Load builtin commands, then user commands.

    A user command that fails to import is logged and skipped.

    Returns:
        Number of user commands loaded.
    """
    load_builtin_commands()

    loaded = 0
    for name, path in find_user_commands(user_dir or USER_COMMANDS_DIR).items():
        try:
            load_command(name, path)
        except CommandLoadError as e:
            logger.warning(str(e))
            continue
        loaded += 1
        if verbose:
            logger.info(f"Loaded command: {name} ({path})")
    return loaded
