from pathlib import Path
from pydantic import BaseModel
from .models import MediaFile, RunCounters

class Event(BaseModel):
    """Base class for all domain events."""
    pass

class DiscoveryStarted(Event):
    directory: Path

class DiscoveryFinished(Event):
    files_found: int

class FileEvent(Event):
    file: MediaFile
    index: int

class FileStarted(FileEvent):
    pass

class FileProcessed(FileEvent):
    pass

class FileFailed(FileEvent):
    error_message: str

class RunCancelled(Event):
    files_processed: int
    counters: RunCounters

class RunFinished(Event):
    counters: RunCounters
