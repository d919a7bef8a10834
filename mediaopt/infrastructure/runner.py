import subprocess
import logging
import time
from typing import List
from mediaopt.domain.models import SubprocessOutcome

class BoundedRunner:
    """Runs an external tool with a wall-clock deadline."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def run(self, command: str, args: List[str], timeout: float) -> SubprocessOutcome:
        """Spawns `command args`, discarding its output, and waits up to `timeout` seconds.

        On expiry the child is killed and reaped before returning TIMED_OUT.
        A child that cannot be spawned counts as a tool failure without an
        exit code.
        """
        cmd = [command, *args]
        start_time = time.monotonic()
        try:
            process = subprocess.Popen(
                cmd,
                start_new_session=True,  # terminal Ctrl+C must not reach the tool
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            self.logger.warning(f"SPAWN_FAILED: {command}: {e}")
            return SubprocessOutcome.failure(None)

        try:
            returncode = process.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            process.kill()
            process.wait()
            self.logger.warning(f"TIMEOUT: {command} pid={process.pid} after {timeout:.1f}s args={args}")
            return SubprocessOutcome.timed_out()

        elapsed = time.monotonic() - start_time
        if returncode != 0:
            self.logger.warning(f"FAILED: {command} exited with code {returncode} elapsed={elapsed:.2f}s args={args}")
            return SubprocessOutcome.failure(returncode)

        self.logger.debug(f"OK: {command} elapsed={elapsed:.2f}s args={args}")
        return SubprocessOutcome.success()
