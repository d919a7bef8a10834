from typing import Optional
from rich.console import Console
from rich.progress import (
    Progress, SpinnerColumn, TextColumn, BarColumn, MofNCompleteColumn, TimeElapsedColumn, TaskID
)
from mediaopt.infrastructure.event_bus import EventBus
from mediaopt.domain.events import (
    DiscoveryStarted, DiscoveryFinished, FileStarted, FileProcessed, FileFailed, RunCancelled
)

class ProgressDisplay:
    """Live progress bar driven by orchestrator events.

    Rich refreshes the bar from its own thread; that thread only reads the
    task state kept here.
    """

    def __init__(self, bus: EventBus, console: Optional[Console] = None):
        self.console = console or Console()
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True
        )
        self._task: Optional[TaskID] = None
        self._setup_subscriptions(bus)

    def _setup_subscriptions(self, bus: EventBus):
        bus.subscribe(DiscoveryStarted, self.on_discovery_started)
        bus.subscribe(DiscoveryFinished, self.on_discovery_finished)
        bus.subscribe(FileStarted, self.on_file_started)
        bus.subscribe(FileProcessed, self.on_file_processed)
        bus.subscribe(FileFailed, self.on_file_failed)
        bus.subscribe(RunCancelled, self.on_run_cancelled)

    def __enter__(self):
        self.progress.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.progress.stop()

    def on_discovery_started(self, event: DiscoveryStarted):
        self._task = self.progress.add_task(f"Scanning {event.directory}...", total=None)

    def on_discovery_finished(self, event: DiscoveryFinished):
        if self._task is not None:
            self.progress.update(self._task, total=event.files_found, description="Optimizing")

    def on_file_started(self, event: FileStarted):
        if self._task is not None:
            self.progress.update(self._task, description=f"{event.file.category.value}: {event.file.path.name}")

    def on_file_processed(self, event: FileProcessed):
        if self._task is not None:
            self.progress.advance(self._task)

    def on_file_failed(self, event: FileFailed):
        self.progress.console.print(
            f"[red]✗[/red] {event.file.path.name}: {event.error_message}", highlight=False
        )

    def on_run_cancelled(self, event: RunCancelled):
        if self._task is not None:
            self.progress.update(self._task, description="[yellow]Cancelled[/yellow]")
