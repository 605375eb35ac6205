from __future__ import annotations
import asyncio
from contextlib import suppress
import logging
from os import PathLike
import subprocess

logger = logging.getLogger(__name__)


async def run(
    *args: str,
    cwd: str | PathLike[str] | None = None,
    timeout: float | None = None,
    strip: bool = True,
) -> str | None:
    """
    Run a command (suppressing stderr) and return its stdout, with leading &
    trailing whitespace stripped if ``strip`` is true.  If the command is not
    installed, exits nonzero, or runs longer than ``timeout`` seconds, return
    `None`.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        )
    except (FileNotFoundError, NotADirectoryError, PermissionError) as e:
        logger.debug("Could not run %s: %s", args[0], e)
        return None
    try:
        stdout, _ = await asyncio.wait_for(proc.communicate(), timeout)
    except asyncio.TimeoutError:
        logger.debug("%s timed out after %s seconds; killing", args[0], timeout)
        with suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()
        return None
    if proc.returncode != 0:
        logger.debug("%s exited with return code %d", args[0], proc.returncode)
        return None
    out = stdout.decode("utf-8", "replace")
    return out.strip() if strip else out
