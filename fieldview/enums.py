"""
Shared style enums used by configuration and every template kind.
"""

from enum import Enum


class Variant(str, Enum):
    """Color variant applied to a rendered element."""

    DEFAULT = "default"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


class Size(str, Enum):
    """Size scale shared by all templates."""

    EXTRA_SMALL = "extra_small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"


class Density(str, Enum):
    """Spacing density."""

    COMPACT = "compact"
    NORMAL = "normal"
    COMFORTABLE = "comfortable"


class Orientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


# Short CSS suffixes for each size, e.g. "badge-sm", "avatar-lg"
SIZE_SUFFIXES: dict[Size, str] = {
    Size.EXTRA_SMALL: "xs",
    Size.SMALL: "sm",
    Size.MEDIUM: "md",
    Size.LARGE: "lg",
    Size.EXTRA_LARGE: "xl",
}
