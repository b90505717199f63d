"""YAML loading and validation of publish metadata.

The metadata file names the target space and ancestor and describes the
local page tree. JSON metadata is accepted as well, since PyYAML parses it.
"""

import os
from typing import Any, Dict, List, Tuple

import yaml

from ..publisher.models import PageNode, PublisherMetadata
from .errors import MetadataError


class MetadataLoader:
    """Loads PublisherMetadata from a YAML file.

    File structure:
        space_key: "~personalSpace"
        ancestor_id: "72189173"
        pages:
          - title: "Some Confluence Content"
            content_file: "some-confluence-content.xhtml"
            attachments:
              attachmentOne.txt: "assets/attachmentOne.txt"
            children:
              - title: "Some Child Content"
                content_file: "child.xhtml"

    Relative content and attachment paths are resolved against the
    directory containing the metadata file. space_key and ancestor_id are
    read as-is; the publisher reports them if they are missing.
    """

    REQUIRED_PAGE_FIELDS = {'title', 'content_file'}

    @classmethod
    def load(cls, metadata_path: str) -> PublisherMetadata:
        """Load and validate metadata from a YAML file.

        Raises:
            MetadataError: If the file cannot be read or is invalid
        """
        try:
            with open(metadata_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise MetadataError(f"Metadata file not found: {metadata_path}")
        except PermissionError:
            raise MetadataError(f"Permission denied reading {metadata_path}")
        except (OSError, UnicodeDecodeError) as e:
            raise MetadataError(f"Could not read {metadata_path}: {e}")

        try:
            metadata_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise MetadataError(f"Invalid YAML syntax: {e}")

        if metadata_dict is None:
            raise MetadataError("Metadata file is empty")

        if not isinstance(metadata_dict, dict):
            raise MetadataError(
                f"Metadata must be a YAML dictionary, got {type(metadata_dict).__name__}"
            )

        base_dir = os.path.dirname(os.path.abspath(metadata_path))
        return cls.parse(metadata_dict, base_dir)

    @classmethod
    def parse(cls, metadata_dict: Dict[str, Any], base_dir: str) -> PublisherMetadata:
        """Build PublisherMetadata from an already parsed dictionary."""
        space_key = metadata_dict.get('space_key')
        ancestor_id = metadata_dict.get('ancestor_id')

        pages = cls._parse_pages(metadata_dict.get('pages'), base_dir, 'pages')

        return PublisherMetadata(
            space_key=None if space_key is None else str(space_key),
            ancestor_id=None if ancestor_id is None else str(ancestor_id),
            pages=pages,
        )

    @classmethod
    def _parse_pages(cls, pages_raw: Any, base_dir: str, path: str) -> Tuple[PageNode, ...]:
        if pages_raw is None:
            return ()
        if not isinstance(pages_raw, list):
            raise MetadataError("Field must be a list", path)

        pages: List[PageNode] = []
        seen_titles = set()
        for i, page_raw in enumerate(pages_raw):
            page = cls._parse_page(page_raw, base_dir, f"{path}[{i}]")
            if page.title in seen_titles:
                raise MetadataError(
                    f"Duplicate sibling title '{page.title}'",
                    f"{path}[{i}].title"
                )
            seen_titles.add(page.title)
            pages.append(page)
        return tuple(pages)

    @classmethod
    def _parse_page(cls, page_raw: Any, base_dir: str, path: str) -> PageNode:
        if not isinstance(page_raw, dict):
            raise MetadataError("Page must be a dictionary", path)

        missing_fields = cls.REQUIRED_PAGE_FIELDS - set(page_raw.keys())
        if missing_fields:
            raise MetadataError(
                f"Missing required fields: {', '.join(sorted(missing_fields))}",
                path
            )

        title = str(page_raw['title'] if page_raw['title'] is not None else '')
        content_file = str(page_raw['content_file'] if page_raw['content_file'] is not None else '')

        if not title.strip():
            raise MetadataError("Field 'title' cannot be empty", f"{path}.title")
        if not content_file.strip():
            raise MetadataError("Field 'content_file' cannot be empty", f"{path}.content_file")

        attachments_raw = page_raw.get('attachments') or {}
        if not isinstance(attachments_raw, dict):
            raise MetadataError(
                "Field 'attachments' must be a mapping of file name to path",
                f"{path}.attachments"
            )
        attachments = {}
        for filename, attachment_path in attachments_raw.items():
            if attachment_path is None or not str(attachment_path).strip():
                raise MetadataError(
                    f"Attachment '{filename}' has no path",
                    f"{path}.attachments"
                )
            attachments[str(filename)] = _resolve(base_dir, str(attachment_path))

        children = cls._parse_pages(page_raw.get('children'), base_dir, f"{path}.children")

        return PageNode(
            title=title,
            content_file=_resolve(base_dir, content_file),
            children=children,
            attachments=attachments,
        )


def _resolve(base_dir: str, file_path: str) -> str:
    if os.path.isabs(file_path):
        return file_path
    return os.path.join(base_dir, file_path)
