"""Bounded execution of external helper processes."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Sequence

from .exceptions import ExternalToolFailure

logger = logging.getLogger(__name__)


async def run_helper(args: Sequence[str], timeout: float) -> str:
    """Run ``args`` and return its decoded stdout.

    The process is killed once ``timeout`` seconds pass. Failing to start,
    timing out, and a non-zero exit status all raise ExternalToolFailure.
    """
    program = args[0]
    logger.debug("Running helper %s", program)
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise ExternalToolFailure(f"{program} could not be started: {exc}") from exc

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError as exc:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()
        raise ExternalToolFailure(f"{program} timed out after {timeout:g}s") from exc

    if proc.returncode != 0:
        detail = stderr.decode("utf-8", errors="replace").strip()
        raise ExternalToolFailure(f"{program} exited with code {proc.returncode}: {detail}")
    return stdout.decode("utf-8", errors="replace")
