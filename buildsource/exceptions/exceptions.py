class PathNotFoundException(Exception):
    """Raised when a config file is not found."""

    def __init__(self, message) -> None:
        long_message = (
            "Failed to find config file. Run `buildsource init` to create one. "
            f"\n\nFull error: {message}"
        )
        super().__init__(long_message)


class UnknownSourceTypeException(Exception):
    """Raised when a source declaration uses a type we don't support."""

    def __init__(self, source_type) -> None:
        # Imported lazily to avoid a cycle with buildsource.types.
        from buildsource.types.source_types import SourceType

        supported = ", ".join(t.value for t in SourceType)
        super().__init__(
            f"Unknown source type `{source_type}`. Supported types are: {supported}"
        )


class MissingAWSSettingException(Exception):
    """Raised when a resource needs an AWS setting that was never provided."""

    def __init__(self, setting: str, resource: str) -> None:
        super().__init__(
            f"`{setting}` is required for {resource}. Set it in your config or "
            f"pass --{setting.replace('_', '-')} on the command line."
        )
