"""Runs the containerized JPlag cross-submission checker.

Working directory contract (mounted at ``/jplag`` in the container)::

    <work_root>/submissions/   one file per submission, written beforehand
    <work_root>/out/           results, including the CSV export

The caller owns ``work_root`` and removes it afterwards.
"""

import asyncio
import uuid
from collections.abc import Callable
from pathlib import Path
from typing import ClassVar

from originality.config.settings import Settings
from originality.external.csv_parser import summarize_comparisons
from originality.external.exceptions import ExternalToolError, ExternalToolTimeout
from originality.external.models import ExternalToolResult
from originality.logging.logger import Log


class JPlagRunner:
    """Invokes JPlag through docker and summarizes its comparison table."""

    CONTAINER_ROOT: ClassVar[str] = "/jplag"
    SUBMISSIONS_DIR: ClassVar[str] = "submissions"
    OUTPUT_DIR: ClassVar[str] = "out"
    FAILED_NOTICE: ClassVar[str] = "jplag-failed-or-skipped"
    READ_CHUNK_BYTES: ClassVar[int] = 64 * 1024
    MAX_LOGGED_LINE_BYTES: ClassVar[int] = 4096

    def __init__(
        self,
        *,
        docker_binary: str = "docker",
        image: str = "ghcr.io/edulinq/jplag-docker:latest",
        threads: int = 4,
        timeout_seconds: float = 300.0,
        csv_filename: str = "results.csv",
        enabled: bool = True,
    ) -> None:
        self._docker_binary = docker_binary
        self._image = image
        self._threads = threads
        self._timeout = timeout_seconds
        self._csv_filename = csv_filename
        self._enabled = enabled

    @classmethod
    def from_settings(cls, settings: Settings) -> "JPlagRunner":
        return cls(
            docker_binary=settings.jplag_docker_binary,
            image=settings.jplag_docker_image,
            threads=settings.jplag_threads,
            timeout_seconds=settings.jplag_timeout_seconds,
            csv_filename=settings.jplag_csv_filename,
            enabled=settings.jplag_enabled,
        )

    def build_command(self, work_root: Path, language: str, container_name: str) -> list[str]:
        return [
            self._docker_binary,
            "run", "--rm",
            "--name", container_name,
            "-v", f"{work_root}:{self.CONTAINER_ROOT}:Z",
            self._image,
            "--mode", "RUN",
            "--csv-export",
            "--language", language,
            "-t", str(self._threads),
            "-r", f"{self.CONTAINER_ROOT}/{self.OUTPUT_DIR}",
            f"{self.CONTAINER_ROOT}/{self.SUBMISSIONS_DIR}",
        ]

    async def run(self, work_root: Path, language: str) -> ExternalToolResult:
        """Run the tool over ``work_root/submissions``.

        Never raises for tool failures: they are reported through a notice
        in the summary so the rest of the report can still be produced.
        """
        if not self._enabled:
            Log.info("JPlag is disabled, skipping external similarity check")
            return self._failed("disabled")

        try:
            await self._execute(work_root, language)
        except ExternalToolTimeout as exc:
            Log.warning(f"JPlag timed out: {exc}")
            return self._failed("timeout")
        except ExternalToolError as exc:
            Log.warning(f"JPlag failed, continuing without it: {exc}")
            return self._failed(str(exc))

        report_dir = work_root / self.OUTPUT_DIR
        csv_path = report_dir / self._csv_filename
        if not csv_path.is_file():
            Log.warning(f"JPlag finished but {csv_path.name} was not found")
            return ExternalToolResult(
                success=True, report_dir=report_dir, summary={"notice": "no-csv-found"}
            )
        summary = summarize_comparisons(csv_path.read_text(encoding="utf-8", errors="replace"))
        return ExternalToolResult(success=True, report_dir=report_dir, summary=summary)

    async def _execute(self, work_root: Path, language: str) -> None:
        (work_root / self.OUTPUT_DIR).mkdir(parents=True, exist_ok=True)
        container_name = f"jplag-{uuid.uuid4().hex[:12]}"
        command = self.build_command(work_root, language, container_name)
        Log.info(f"Running JPlag: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise ExternalToolError(f"failed to start {self._docker_binary}: {exc}") from exc

        try:
            return_code = await asyncio.wait_for(self._communicate(process), self._timeout)
        except asyncio.TimeoutError as exc:
            await self._terminate(process, container_name)
            raise ExternalToolTimeout(
                f"jplag did not finish within {self._timeout:g}s"
            ) from exc
        except Exception as exc:
            await self._terminate(process, container_name)
            raise ExternalToolError(f"jplag output could not be read: {exc!r}") from exc

        if return_code != 0:
            raise ExternalToolError(f"jplag docker exited with code {return_code}")

    async def _communicate(self, process: asyncio.subprocess.Process) -> int:
        await asyncio.gather(
            self._pump(process.stdout, Log.info, "[jplag]"),
            self._pump(process.stderr, Log.warning, "[jplag-err]"),
        )
        return await process.wait()

    @classmethod
    async def _pump(
        cls,
        stream: asyncio.StreamReader | None,
        log: Callable[[str], None],
        prefix: str,
    ) -> None:
        # Chunked reads: a single line may exceed the StreamReader line limit.
        if stream is None:
            return
        pending = b""
        while chunk := await stream.read(cls.READ_CHUNK_BYTES):
            *lines, pending = (pending + chunk).split(b"\n")
            for line in lines:
                cls._log_line(log, prefix, line)
            if len(pending) > cls.MAX_LOGGED_LINE_BYTES:
                cls._log_line(log, prefix, pending)
                pending = b""
        if pending:
            cls._log_line(log, prefix, pending)

    @classmethod
    def _log_line(cls, log: Callable[[str], None], prefix: str, line: bytes) -> None:
        text = line[: cls.MAX_LOGGED_LINE_BYTES].decode("utf-8", errors="replace").rstrip()
        if len(line) > cls.MAX_LOGGED_LINE_BYTES:
            text += f" ... [{len(line)} bytes]"
        log(f"{prefix} {text}")

    async def _terminate(self, process: asyncio.subprocess.Process, container_name: str) -> None:
        if process.returncode is None:
            process.kill()
            await process.wait()
        # Killing the docker client leaves the container running.
        try:
            killer = await asyncio.create_subprocess_exec(
                self._docker_binary, "kill", container_name,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
            await asyncio.wait_for(killer.wait(), 10)
        except (OSError, asyncio.TimeoutError) as exc:
            Log.warning(f"Could not kill container {container_name}: {exc}")

    def _failed(self, reason: str) -> ExternalToolResult:
        return ExternalToolResult(
            success=False, summary={"notice": self.FAILED_NOTICE, "reason": reason}
        )
