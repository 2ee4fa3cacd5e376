"""Enumerations for archpeek."""

import enum


class ContentCategory(enum.Enum):
    """Coarse classification of a stream's leading bytes."""

    PREVIEWABLE_TEXT = "previewable-text"
    UNKNOWN = "unknown"
    NON_PREVIEWABLE = "non-previewable"

    @property
    def previewable(self) -> bool:
        """Whether content of this category is rendered to the console."""
        return self is not ContentCategory.NON_PREVIEWABLE


class ContainerKind(enum.Enum):
    """How a top-level input file is unpacked before rendering."""

    ZIP = "zip"
    TAR = "tar"
    GZIP = "gzip"
    BZIP2 = "bzip2"
    PLAIN = "plain"


class OutputMode(enum.Enum):
    """What is printed for each file or archive entry."""

    CONTENT = "content"
    INFO = "info"


# Signature MIME labels mapped to the container handler that unpacks them.
CONTAINER_MIME_TYPES: dict[str, ContainerKind] = {
    "application/zip": ContainerKind.ZIP,
    "application/x-tar": ContainerKind.TAR,
    "application/gzip": ContainerKind.GZIP,
    "application/x-bzip2": ContainerKind.BZIP2,
}
