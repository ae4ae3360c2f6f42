# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/pipeline/processors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processor registry: binds commentary processors to file types.

Processor modules register their classes with `register_filetype`; each
registration creates a dedicated instance bound to that file type.
`register_all_processors` imports the built-in processor modules once.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Callable

from orgcommentary.config.logging import get_logger
from orgcommentary.filetypes import get_file_type_registry

if TYPE_CHECKING:
    from orgcommentary.filetypes import FileType
    from orgcommentary.pipeline.processors.base import CommentaryProcessor

logger = get_logger(__name__)

_BUILTIN_PROCESSOR_MODULES: tuple[str, ...] = ("orgcommentary.pipeline.processors.lisp",)

_processor_registry: dict[str, CommentaryProcessor] = {}


def register_filetype(
    name: str,
) -> Callable[[type[CommentaryProcessor]], type[CommentaryProcessor]]:
    """Class decorator registering a processor for the file type ``name``.

    Raises:
        ValueError: If the file type is unknown or already has a processor.
    """
    registry: dict[str, FileType] = get_file_type_registry()
    if name not in registry:
        raise ValueError(f"Unknown file type: {name}")

    def decorator(cls: type[CommentaryProcessor]) -> type[CommentaryProcessor]:
        if name in _processor_registry:
            raise ValueError(f"File type {name} already has a processor")
        instance: CommentaryProcessor = cls()
        instance.file_type = registry[name]
        _processor_registry[name] = instance
        logger.trace("Registered %s for file type %s", cls.__name__, name)
        return cls

    return decorator


def register_all_processors() -> None:
    """Import the built-in processor modules (idempotent)."""
    for module in _BUILTIN_PROCESSOR_MODULES:
        importlib.import_module(module)


def get_processor(file_type_name: str) -> CommentaryProcessor | None:
    """Return the processor bound to ``file_type_name``, if any."""
    register_all_processors()
    return _processor_registry.get(file_type_name)


def get_processor_registry() -> dict[str, CommentaryProcessor]:
    """Return a copy of the processor registry, keyed by file type name."""
    register_all_processors()
    return dict(_processor_registry)
