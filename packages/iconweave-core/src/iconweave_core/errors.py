"""Custom exception hierarchy for iconweave-core.

This module defines the exception classes raised by the generation pipeline:
- IconweaveError: Base exception for all iconweave errors
- ConfigurationError: Raised when generator configuration is invalid
- AssetError / AssetReadError: Raised when an icon file cannot be used
- ExtractionError: Raised when the <svg> body cannot be extracted
- FormatterError / FormatterNotFoundError: Raised by the formatting stages
- GenerationError: Raised when a strict run aborts on an asset

User-facing messages are safe to display; technical details
(tracebacks, raw process output) are logged internally via structlog.
"""

from __future__ import annotations

from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class IconweaveError(Exception):
    """Base exception for iconweave.

    All iconweave exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Message to display to the user.
        internal_details: Optional technical details for logging only.

    Example:
        >>> raise IconweaveError(
        ...     "Icon generation failed",
        ...     internal_details="leptosfmt exited with status 101",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize IconweaveError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "iconweave_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ConfigurationError(IconweaveError):
    """Raised when generator configuration is missing or invalid.

    Use this exception when:
    - The output directory is not supplied (no OUT_DIR, no --out-dir)
    - The icon root does not exist
    - An iconweave.yaml file cannot be parsed

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Name of the offending setting (if known).

    Example:
        >>> raise ConfigurationError(
        ...     "Output directory not set",
        ...     field_path="out_dir",
        ... )
        # User sees: "Output directory not set (field 'out_dir')"
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        where = ", ".join(
            part
            for part in (
                f"in {file_path}" if file_path else "",
                f"field '{field_path}'" if field_path else "",
            )
            if part
        )
        super().__init__(
            f"{user_message} ({where})" if where else user_message,
            internal_details=internal_details,
        )
        self.file_path = file_path
        self.field_path = field_path


class AssetError(IconweaveError):
    """Raised when an icon asset cannot be used.

    Attributes:
        asset_path: Path of the offending file.

    Example:
        >>> raise AssetError("Asset has no file extension", asset_path=Path("icons/README"))
        # User sees: "Asset has no file extension: icons/README"
    """

    def __init__(
        self,
        user_message: str,
        *,
        asset_path: Path | str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize AssetError.

        Args:
            user_message: Safe message to display to the user.
            asset_path: Path of the offending asset (optional).
            internal_details: Technical details for internal logging only.
        """
        if asset_path is not None:
            user_message = f"{user_message}: {asset_path}"
        super().__init__(user_message, internal_details=internal_details)
        self.asset_path = Path(asset_path) if asset_path is not None else None


class AssetReadError(AssetError):
    """Raised when an asset file cannot be read or decoded as UTF-8."""


class ExtractionError(AssetError):
    """Raised when no <svg> container is found or its body is not embeddable markup.

    Example:
        >>> raise ExtractionError("No <svg> element found", asset_path=Path("icons/x.svg"))
    """


class FormatterError(IconweaveError):
    """Raised when a formatting stage fails.

    Covers process spawn failures, non-zero exit statuses and
    output that is not valid UTF-8.

    Attributes:
        command: The formatter command line, if an external process was involved.
    """

    def __init__(
        self,
        user_message: str,
        *,
        command: list[str] | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize FormatterError.

        Args:
            user_message: Safe message to display to the user.
            command: Formatter command line (optional).
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message, internal_details=internal_details)
        self.command = list(command) if command else None


class FormatterNotFoundError(FormatterError):
    """Raised when the external formatter cannot be executed at all.

    Example:
        >>> raise FormatterNotFoundError(
        ...     "leptosfmt not found. Please install it with: cargo install leptosfmt",
        ...     command=["leptosfmt", "--stdin"],
        ... )
    """


class GenerationError(IconweaveError):
    """Raised when a strict run aborts on a single asset.

    Wraps the underlying cause and names the offending file so the
    build diagnostic points straight at it.

    Attributes:
        asset_path: Path of the asset that aborted the run.
        cause: The underlying iconweave error.

    Example:
        >>> raise GenerationError(Path("icons/broken.svg"), FormatterError("leptosfmt failed"))
        # User sees: "Icon generation aborted on icons/broken.svg: leptosfmt failed"
    """

    def __init__(
        self,
        asset_path: Path,
        cause: IconweaveError,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize GenerationError.

        Args:
            asset_path: Path of the asset that failed.
            cause: Underlying error raised while processing the asset.
            internal_details: Technical details for internal logging only.
        """
        # Asset errors already name the file
        if isinstance(cause, AssetError) and cause.asset_path is not None:
            message = f"Icon generation aborted: {cause.user_message}"
        else:
            message = f"Icon generation aborted on {asset_path}: {cause.user_message}"
        super().__init__(message, internal_details=internal_details)
        self.asset_path = asset_path
        self.cause = cause
