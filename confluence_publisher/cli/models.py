"""Data models for CLI operations.

All models use dataclasses, following the patterns of
confluence_publisher/publisher/models.py.
"""

from dataclasses import dataclass
from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the confluence-publish command.

    - SUCCESS (0): Publish completed
    - GENERAL_ERROR (1): Invalid metadata or parameters, unreadable files,
      ambiguous remote state or any other failure
    - AUTH_ERROR (3): Missing or rejected credentials
    - NETWORK_ERROR (4): Confluence unreachable

    Example:
        >>> raise typer.Exit(ExitCode.SUCCESS)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class PublishSummary:
    """Counts of page events observed during one publish.

    Attributes:
        added_count: Pages created
        updated_count: Pages whose content or title was rewritten
        deleted_count: Orphan pages removed (descendants included)
        unchanged_count: Pages visited without any write
    """
    added_count: int = 0
    updated_count: int = 0
    deleted_count: int = 0
    unchanged_count: int = 0
