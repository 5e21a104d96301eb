"""Parse, transform and serialize a stylesheet in one call."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from responsive_type.config import TransformConfig
from responsive_type.events.bus import EventBus
from responsive_type.model.context import Context
from responsive_type.model.diagnostic import Diagnostic
from responsive_type.stylesheet import Root, parse_stylesheet, serialize
from responsive_type.transforms import apply_transforms
from responsive_type.transforms.base import Transform

log = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Transformed CSS plus everything recorded while producing it."""

    css: str
    root: Root
    diagnostics: list[Diagnostic] = field(default_factory=list)
    root_size: str = ""

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


def transform_root(
    root: Root,
    config: TransformConfig | None = None,
    event_bus: EventBus | None = None,
    custom_transforms: list[Transform] | None = None,
) -> Context:
    """Transform *root* in place with a fresh run context and return it."""
    context = Context(config=config or TransformConfig(), event_bus=event_bus or EventBus())
    apply_transforms(root, context, custom_transforms)
    return context


def process_css(
    source: str,
    config: TransformConfig | None = None,
    event_bus: EventBus | None = None,
    custom_transforms: list[Transform] | None = None,
) -> ProcessResult:
    """Transform CSS *source*, returning the rewritten text and diagnostics.

    Raises :class:`~responsive_type.errors.StylesheetParseError` for
    malformed input and :class:`~responsive_type.errors.TransformError` for
    declarations that cannot be transformed.
    """
    config = config or TransformConfig()
    root = parse_stylesheet(source)
    context = transform_root(root, config, event_bus, custom_transforms)
    log.debug("Serializing with root size %s", context.root_size)
    return ProcessResult(
        css=serialize(root, indent=config.indent),
        root=root,
        diagnostics=list(context.diagnostics),
        root_size=context.root_size,
    )
