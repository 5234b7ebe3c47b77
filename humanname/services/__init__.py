"""
Services package for human name parsing.

This package contains all service classes used by the name parser,
organized by pipeline stage.
"""

from humanname.services.classification import TokenClassifier, is_initial
from humanname.services.formatting import NameFormattingService
from humanname.services.joining import PieceJoiningService
from humanname.services.multiname import MultiNameSplitter
from humanname.services.nicknames import NicknameExtractionService
from humanname.services.parsing import NameParsingService
from humanname.services.postprocessing import PostProcessingService
from humanname.types import ClassificationTables, HumanName, NameParserConfig, Prefer

__all__ = [
    "ClassificationTables",
    "HumanName",
    "MultiNameSplitter",
    "NameFormattingService",
    "NameParserConfig",
    "NameParsingService",
    "NicknameExtractionService",
    "PieceJoiningService",
    "PostProcessingService",
    "Prefer",
    "TokenClassifier",
    "is_initial",
]
