"""mdBook preprocessor numbering centered equations."""

from .config import NumEqConfig
from .labels import LabelInfo
from .preprocessor import NumEqPreprocessor

__all__ = ["LabelInfo", "NumEqConfig", "NumEqPreprocessor"]
