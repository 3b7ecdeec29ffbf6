# File: classfinder/core/common/enums.py

from enum import Enum, unique

@unique
class CandidateKind(str, Enum):
    ARCHIVE_FILE = "archive_file"
    LOOSE_CLASS_FILE = "loose_class_file"
