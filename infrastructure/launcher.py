"""Open an application at a target location via the `open` utility."""

from __future__ import annotations

from pathlib import Path
import shlex
import subprocess

from loguru import logger

from core.errors import ProcessLaunchError
from core.models import AppDescriptor, CommandResult
from core.services.interfaces import AccessGrant, CommandRunner
from core.services.path_service import working_directory_for
from infrastructure.scoped_access import UnsandboxedAccess, scoped_access

DEFAULT_OPENER = "open"


class AppLauncher:
    """Runs ``open -a <app> <target>`` as an argument vector, never via a shell."""

    def __init__(
        self,
        access: AccessGrant | None = None,
        opener: str = DEFAULT_OPENER,
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize the launcher.

        Args:
            access: Grant wrapped around each invocation
            opener: Executable used to open applications
            runner: Process runner, `subprocess.run` by default
        """
        self.access = access or UnsandboxedAccess()
        self.opener = opener
        self._run = runner or subprocess.run

    def build_command(self, app: AppDescriptor, target: str | Path) -> list[str]:
        """Return the argument vector that opens `app` at `target`."""
        return [self.opener, "-a", app.name, str(target)]

    def command_string(self, app: AppDescriptor, target: str | Path) -> str:
        """Shell-quoted display form of the command, for logs only."""
        return shlex.join(self.build_command(app, target))

    def launch(self, app: AppDescriptor, target: str | Path) -> CommandResult:
        """Open `app` at `target` and wait for the opener to finish.

        Raises:
            ProcessLaunchError: if the process could not be spawned. The
                access grant has already been released when this propagates.
        """
        location = Path(target)
        argv = self.build_command(app, location)
        display = shlex.join(argv)
        cwd = working_directory_for(location)
        logger.info("Opening {} at {}: {}", app.name, location, display)

        with scoped_access(self.access, location):
            try:
                completed = self._run(
                    argv, cwd=str(cwd), capture_output=True, text=True, check=False
                )
            except OSError as ex:
                raise ProcessLaunchError(app.name, location, str(ex)) from ex

        result = CommandResult(
            success=completed.returncode == 0,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            returncode=completed.returncode,
            command=display,
        )
        if result.success:
            logger.debug("stdout: {}", result.stdout)
            logger.debug("stderr: {}", result.stderr)
        else:
            logger.error(
                "Open {} failed (exit {}): {}",
                app.name,
                result.returncode,
                result.stderr.strip(),
            )
        return result
