from __future__ import annotations

from dataclasses import dataclass

from responsive_type.units import DEFAULT_ROOT_SIZE


@dataclass(frozen=True)
class TransformConfig:
    keyword: str = "responsive"
    default_root_size: str = DEFAULT_ROOT_SIZE
    media_type: str = "screen"  # "" emits bare "(max-width: ...)" conditions
    indent: int = 4
