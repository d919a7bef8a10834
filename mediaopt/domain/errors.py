class MediaOptError(Exception):
    """Base class for errors that abort the whole run."""


class MissingToolError(MediaOptError):
    INSTALL_HINT = "sudo apt install libimage-exiftool-perl jpegoptim optipng libheif-examples webp ffmpeg"

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"'{tool}' not found in PATH. Install it with: {self.INSTALL_HINT}")


class FolderSizeError(MediaOptError):
    pass


class ConfigError(MediaOptError):
    pass
