import shutil
import logging
from typing import Callable, Iterable, Optional
from mediaopt.domain.errors import MissingToolError

REQUIRED_TOOLS = ("exiftool", "jpegoptim", "optipng", "heif-convert", "cwebp", "ffmpeg")

logger = logging.getLogger(__name__)

def check_tools(
    tools: Iterable[str] = REQUIRED_TOOLS,
    which: Callable[[str], Optional[str]] = shutil.which,
):
    """Raises MissingToolError for the first tool not resolvable in PATH."""
    for tool in tools:
        location = which(tool)
        if not location:
            raise MissingToolError(tool)
        logger.debug(f"Found {tool} at {location}")
