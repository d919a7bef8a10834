from typing import Optional
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from mediaopt.domain.models import RunCounters

class RunReport(BaseModel):
    size_before: int
    size_after: Optional[int] = None
    counters: RunCounters
    cancelled: bool = False
    files_total: int = 0
    files_processed: int = 0
    swept: Optional[int] = None

    @property
    def saved_bytes(self) -> Optional[int]:
        if self.size_after is None:
            return None
        return self.size_before - self.size_after

    @property
    def saved_percent(self) -> Optional[float]:
        saved = self.saved_bytes
        if saved is None:
            return None
        if self.size_before == 0:
            return 0.0
        return saved / self.size_before * 100.0

def format_kb(size: Optional[int]) -> str:
    if size is None:
        return "unknown"
    return f"{size // 1024} KB"

def render_report(report: RunReport, console: Console):
    """Prints the final, or partial, summary table."""
    c = report.counters
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="bold")

    table.add_row("Size before", format_kb(report.size_before))
    table.add_row("Size after", format_kb(report.size_after))
    if report.saved_bytes is None:
        table.add_row("Space saved", "unknown")
    else:
        table.add_row("Space saved", f"{format_kb(report.saved_bytes)} ({report.saved_percent:.2f}%)")
    table.add_row("Files processed", f"{report.files_processed} / {report.files_total}")
    table.add_row("Metadata cleaned", str(c.metadata_cleaned))
    table.add_row("JPG optimized", str(c.jpg_optimized))
    table.add_row("PNG optimized", str(c.png_optimized))
    table.add_row("HEIC found (large)", str(c.heic_found))
    table.add_row("HEIC converted to WebP", str(c.heic_converted))
    table.add_row("Videos found", str(c.videos_found))
    table.add_row("Videos optimized", str(c.videos_optimized))
    if c.videos_failed:
        table.add_row("Videos failed", f"[red]{c.videos_failed}[/red]")
    table.add_row("Saved by video", format_kb(c.video_bytes_saved))
    if report.swept is not None:
        table.add_row("Temp files removed", str(report.swept))

    if report.cancelled:
        title, style = "[bold yellow]Interrupted: partial report[/bold yellow]", "yellow"
    else:
        title, style = "[bold green]Optimization complete[/bold green]", "green"
    console.print(Panel.fit(table, title=title, border_style=style))
