"""Shell commands that start and stop the game server processes."""

import re

__all__ = [
    "GS_STOP_COMMAND",
    "HOME_PLACEHOLDER",
    "build_start_command",
    "build_stop_command",
    "build_gs_command",
]

HOME_PLACEHOLDER = "$HOME$"
GS_STOP_COMMAND = "pkill -9 gs"

_GS_INSTANCE = "gs01"
_GS_CONFIGS = "gs.conf gmserver.conf gsalias.conf"
_GS_MAPS = "is61"
_GS_LOG_NAME = "maps"
_FORMAT_SPEC = re.compile(r"%(.?)")


def _expand_home(path, home_path):
    return path.replace(HOME_PLACEHOLDER, home_path + "/")


def _apply_shell_format(template, command):
    """Substitute ``command`` for the single ``%s`` of ``template``."""
    used = False

    def substitute(match):
        nonlocal used
        spec = match.group(1)
        if spec == "%":
            return "%"
        if spec == "s" and not used:
            used = True
            return command
        raise ValueError(f"unsupported format directive %{spec} in {template!r}")

    return _FORMAT_SPEC.sub(substitute, template)


def build_start_command(directory, start, file_name, params, home_path):
    """Command line that starts one server process in the background.

    With a ``start`` script that script is run; otherwise the executable
    ``file_name`` is run with ``params``. Output goes to
    ``<home>/logs/<file_name>.log``.
    """
    workdir = _expand_home(directory, home_path)
    if start:
        return f"cd {workdir};{start} > {home_path}/logs/{file_name}.log &"
    return f"cd {workdir};./{file_name} {params} > {home_path}/logs/{file_name}.log &"


def build_stop_command(kill):
    """Command line that stops one server process."""
    if not kill:
        raise ValueError("process has no stop command")
    return f"{kill}"


def build_gs_command(gs_name, gs_path, log_path, shell_add, home_path):
    """Command line that starts the game server.

    ``shell_add`` is a template whose ``%s`` receives the launch command;
    each doubled backslash in it separates shell commands.
    """
    logs = _expand_home(log_path, home_path)
    launch = (
        f"./{gs_name} {_GS_INSTANCE} {_GS_CONFIGS} {_GS_MAPS} > {logs}/{_GS_LOG_NAME}.log &"
    )
    wrapped = _apply_shell_format(shell_add.replace("\\\\", ";"), launch)
    workdir = _expand_home(gs_path, home_path)
    return f"cd {workdir};{wrapped}"