import typer
import logging
from pathlib import Path
from typing import Optional
from rich.console import Console

from mediaopt.config.loader import load_config
from mediaopt.infrastructure.logging import setup_logging
from mediaopt.infrastructure.event_bus import EventBus
from mediaopt.infrastructure.file_scanner import FileScanner
from mediaopt.infrastructure.housekeeping import HousekeepingService
from mediaopt.infrastructure.disk_usage import folder_size
from mediaopt.infrastructure.tools import check_tools
from mediaopt.infrastructure.toolkit import ExternalToolkit
from mediaopt.pipeline.cancellation import CancellationToken
from mediaopt.pipeline.orchestrator import Orchestrator
from mediaopt.ui.progress import ProgressDisplay
from mediaopt.ui.report import RunReport, render_report
from mediaopt.domain.errors import MediaOptError, FolderSizeError

app = typer.Typer(help="mediaopt - in-place batch optimizer for photos and videos")

@app.command()
def optimize(
    directory: Path = typer.Argument(Path("."), help="Directory to optimize (default: current directory)"),
    cleanup: bool = typer.Option(False, "--cleanup", "-C", help="Only remove leftover temp files and exit"),
    config_path: Optional[Path] = typer.Option(Path("conf/mediaopt.yaml"), "--config", "-c", help="Path to YAML config"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Override the log file location"),
    debug: bool = typer.Option(False, "--debug/--no-debug", help="Enable verbose debug logging")
):
    """Strip metadata, recompress images, convert large HEIC to WebP and transcode videos in place."""
    if not directory.is_dir():
        typer.secho(f"Error: Directory {directory} does not exist.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    console = Console()
    try:
        config = load_config(config_path)
        if log_file is not None: config.general.log_file = log_file
        if debug: config.general.debug = True

        logger = setup_logging(config.general.log_file, debug=config.general.debug)
        logger.info(f"mediaopt started: directory={directory}, cleanup_only={cleanup}")

        housekeeper = HousekeepingService(config.general.temp_suffixes)
        if cleanup:
            removed = housekeeper.cleanup_temp_files(directory)
            console.print(f"🧹 Removed {removed} temp files from {directory}")
            return

        check_tools()
        size_before = folder_size(directory)
        console.print(f"📂 Target directory: {directory} ({size_before // 1024} KB)")

        bus = EventBus()
        token = CancellationToken()
        display = ProgressDisplay(bus, console)
        orchestrator = Orchestrator(
            config=config,
            event_bus=bus,
            file_scanner=FileScanner(skip_suffixes=config.general.temp_suffixes),
            toolkit=ExternalToolkit(config),
            cancel_token=token
        )

        token.install()
        try:
            with display:
                summary = orchestrator.run(directory)
        finally:
            token.restore()

        swept = None
        if not summary.cancelled:
            swept = housekeeper.cleanup_temp_files(directory)

        try:
            size_after = folder_size(directory)
        except FolderSizeError as e:
            logger.warning(f"Could not measure size after run: {e}")
            size_after = None

        report = RunReport(
            size_before=size_before,
            size_after=size_after,
            counters=summary.counters,
            cancelled=summary.cancelled,
            files_total=summary.files_total,
            files_processed=summary.files_processed,
            swept=swept
        )
        render_report(report, console)
        logger.info(f"mediaopt finished: cancelled={summary.cancelled}, counters={summary.counters.model_dump()}")

    except KeyboardInterrupt:
        # Ctrl+C outside the processing loop, where the cancel handler is not installed
        typer.echo("\nInterrupted by user")
        raise typer.Exit(code=130)

    except MediaOptError as e:
        logging.getLogger(__name__).error(str(e))
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
