from responsive_type.transforms.builder import GeneratedRules, build_rules
from responsive_type.transforms.collector import collect_parameters
from responsive_type.transforms.responsive import ResponsiveTypeTransform

BUILTIN_TRANSFORMS = [
    ResponsiveTypeTransform(),
]


def apply_transforms(root, context, custom_transforms=None):
    """Apply the built-in transforms (and any custom ones) to *root*."""
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        root = t.apply(root, context)
    return root


__all__ = [
    "BUILTIN_TRANSFORMS",
    "GeneratedRules",
    "ResponsiveTypeTransform",
    "apply_transforms",
    "build_rules",
    "collect_parameters",
]
