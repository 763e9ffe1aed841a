"""Option descriptors, indices and the BuildOptionDetails registry."""

from .descriptors import OptionDescriptor, extract_descriptors
from .external import ExternalSettingIndex
from .labels import Label
from .name_index import NameIndex
from .registry import BuildOptionDetails, OptionRow

__all__ = [
    "BuildOptionDetails",
    "ExternalSettingIndex",
    "Label",
    "NameIndex",
    "OptionDescriptor",
    "OptionRow",
    "extract_descriptors",
]
