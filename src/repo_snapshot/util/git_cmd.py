# src/repo_snapshot/util/git_cmd.py
from __future__ import annotations

import logging
import os
import shlex
import signal
import subprocess
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from ..errors import IoError

logger = logging.getLogger("app.git")


@dataclass(frozen=True)
class ProcessResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and not self.timed_out


class ProcessRunner(Protocol):
    """
    Runs one external command to completion.

    Implementations kill the child once `timeout` seconds elapse and report it
    with `timed_out=True`; a command that cannot be launched raises IoError.
    """

    def run(self, argv: Sequence[str], *, timeout: int, cwd: Optional[str] = None) -> ProcessResult:
        ...


def _base_git_env() -> dict:
    """
    Environment knobs to avoid hangs and fail fast on bad networks.
    You can override via container env if needed.
    """
    env = {
        # never prompt in headless environments (private repos fail instead of hanging)
        "GIT_TERMINAL_PROMPT": os.getenv("GIT_TERMINAL_PROMPT", "0"),
        "GIT_ASKPASS": os.getenv("GIT_ASKPASS", "echo"),
        # bail out if the connection is too slow or stalls
        "GIT_HTTP_LOW_SPEED_LIMIT": os.getenv("GIT_HTTP_LOW_SPEED_LIMIT", "1000"),  # bytes/sec
        "GIT_HTTP_LOW_SPEED_TIME": os.getenv("GIT_HTTP_LOW_SPEED_TIME", "20"),      # seconds
        # pass through proxies if present
        "HTTP_PROXY": os.getenv("HTTP_PROXY", ""),
        "HTTPS_PROXY": os.getenv("HTTPS_PROXY", ""),
        "NO_PROXY": os.getenv("NO_PROXY", ""),
    }
    # Drop empty proxy keys to avoid overriding Docker defaults
    return {k: v for k, v in env.items() if v}


def format_cmd(argv: Sequence[str]) -> str:
    return " ".join(map(shlex.quote, argv))


class SubprocessRunner:
    """
    ProcessRunner backed by subprocess with a non-interactive git environment.

    Each command runs in its own session so a timeout kills the whole process
    group, including helpers git forks (remote-https, index-pack, fetch-pack).
    """

    def __init__(self, extra_env: Optional[dict] = None) -> None:
        self.extra_env = extra_env or {}

    def run(self, argv: Sequence[str], *, timeout: int, cwd: Optional[str] = None) -> ProcessResult:
        env = os.environ.copy()
        env.update(_base_git_env())
        env.update(self.extra_env)
        logger.debug("exec: %s (timeout=%ss)", format_cmd(argv), timeout)
        try:
            proc = subprocess.Popen(
                list(argv),
                cwd=cwd,
                env=env,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                start_new_session=True,
            )
        except OSError as e:
            raise IoError(f"failed to launch {format_cmd(argv)}: {e}") from e

        try:
            stdout, stderr = proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            _kill_group(proc)
            stdout, stderr = proc.communicate()
            logger.debug("killed after %ss: %s", timeout, format_cmd(argv))
            return ProcessResult(
                returncode=proc.returncode if proc.returncode is not None else -1,
                stdout=stdout or "",
                stderr=stderr or "",
                timed_out=True,
            )
        return ProcessResult(returncode=proc.returncode, stdout=stdout or "", stderr=stderr or "")


def _kill_group(proc: subprocess.Popen) -> None:
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass

