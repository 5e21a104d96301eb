"""Responsive type transform: rewrites ``responsive`` declarations in place."""

from __future__ import annotations

import logging

from responsive_type.events.types import (
    DeclarationTransformed,
    RootSizeChanged,
    TransformCompleted,
    TransformStarted,
)
from responsive_type.model.context import Context
from responsive_type.model.params import Attribute
from responsive_type.stylesheet.model import Declaration, Root, Rule
from responsive_type.transforms.builder import build_rules
from responsive_type.transforms.collector import collect_parameters

log = logging.getLogger(__name__)


class ResponsiveTypeTransform:
    """Replace ``responsive`` font-size, line-height and letter-spacing values.

    Each matching declaration becomes a ``calc()`` interpolation between its
    min and max size, and two ``@media`` blocks are inserted after its rule to
    pin the size below the lower width and above the upper width::

        h1 { font-size: calc(14px + 26 * ((100vw - 420px) / 860)); }
        @media screen and (max-width: 420px) { h1 { font-size: 14px; } }
        @media screen and (min-width: 1280px) { h1 { font-size: 40px; } }

    Rules whose selector mentions ``html`` recalibrate the root font size
    used for px -> rem conversion, in document order.
    """

    def apply(self, root: Root, context: Context) -> Root:
        context.event_bus.emit(TransformStarted(root_size=context.root_size))
        transformed = 0
        for rule in root.walk_rules():
            if rule.parent is None:
                continue
            if "html" in rule.selector:
                self._calibrate_root_size(rule, context)
            for decl in rule.declarations():
                if Attribute.from_prop(decl.prop) is None:
                    continue
                if self._transform(decl, context):
                    transformed += 1

        context.event_bus.emit(
            TransformCompleted(transformed=transformed, warnings=len(context.warnings))
        )
        log.info(
            "Transformed %d declaration(s) with %d warning(s)",
            transformed,
            len(context.warnings),
        )
        return root

    @staticmethod
    def _calibrate_root_size(rule: Rule, context: Context) -> None:
        for decl in rule.declarations(Attribute.FONT_SIZE.value):
            if "px" in decl.value:
                context.root_size = decl.value
                log.debug("Root font size set to %s by %r", decl.value, rule.selector)
                context.event_bus.emit(
                    RootSizeChanged(selector=rule.selector, root_size=decl.value)
                )

    @staticmethod
    def _transform(decl: Declaration, context: Context) -> bool:
        if context.config.keyword not in decl.value:
            return False
        # Consumed earlier in this pass by a sibling's collection.
        if decl.parent is None:
            return False

        rule = decl.parent
        attribute = Attribute.from_prop(decl.prop)
        if not isinstance(rule, Rule) or attribute is None:
            return False

        params = collect_parameters(rule, attribute, context.config.keyword)
        new_rules = build_rules(rule, attribute, params, context)

        decl.replace_with(
            Declaration(
                prop=decl.prop,
                value=new_rules.responsive,
                important=decl.important,
                line=decl.line,
                column=decl.column,
            )
        )

        container = rule.parent
        if container is not None:
            container.insert_after(rule, new_rules.min_media)
            container.insert_after(new_rules.min_media, new_rules.max_media)

        log.debug("%s { %s: %s }", rule.selector, decl.prop, new_rules.responsive)
        context.event_bus.emit(
            DeclarationTransformed(
                selector=rule.selector,
                prop=decl.prop,
                params=params,
                expression=new_rules.responsive,
            )
        )
        return True
