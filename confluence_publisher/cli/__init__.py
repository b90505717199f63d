"""Command-line interface for publishing page trees to Confluence.

This package provides the `confluence-publish` CLI tool, which loads publish
metadata, runs the publisher and reports every page event on the console.
"""

from .models import ExitCode, PublishSummary
from .output import ConsolePublisherListener, OutputHandler

__all__ = [
    'ExitCode',
    'PublishSummary',
    'ConsolePublisherListener',
    'OutputHandler',
]
