"""The set of checks that can be run on a CZI document, and the checker interface."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import IntEnum


class CZIChecks(IntEnum):
    """Identifies one check; the numeric order is the order in which checks run."""

    SUB_BLOCK_DIRECTORY_POSITIONS_WITHIN_RANGE = 0
    SUB_BLOCK_DIRECTORY_SEGMENT_VALID = 1
    CONSISTENT_SUB_BLOCK_COORDINATES = 2
    DUPLICATE_SUB_BLOCK_COORDINATES = 3
    BENABLED_DOCUMENT = 4
    SAME_PIXELTYPE_PER_CHANNEL = 5
    PLANES_INDICES_START_AT_ZERO = 6
    PLANE_INDICES_ARE_CONSECUTIVE = 7
    SUBBLOCKS_HAVE_MINDEX = 8
    BASIC_METADATA_VALIDATION = 9
    XML_METADATA_SCHEMA_VALIDATION = 10
    CHECK_OVERLAPPING_SCENES_ON_LAYER0 = 11
    CHECK_SUB_BLOCK_BITMAP_VALID = 12
    CONSISTENT_M_INDEX = 13
    ATTACHMENT_DIRECTORY_POSITIONS_WITHIN_RANGE = 14
    APPLIANCE_METADATA_TOPOGRAPHY_ITEM_VALID = 15

    def __str__(self) -> str:
        return czi_check_to_string(self)


_CHECK_NAMES = {
    CZIChecks.SUB_BLOCK_DIRECTORY_POSITIONS_WITHIN_RANGE: "SubBlockDirectoryPositionsWithinRange",
    CZIChecks.SUB_BLOCK_DIRECTORY_SEGMENT_VALID: "SubBlockDirectorySegmentValid",
    CZIChecks.CONSISTENT_SUB_BLOCK_COORDINATES: "ConsistentSubBlockCoordinates",
    CZIChecks.DUPLICATE_SUB_BLOCK_COORDINATES: "DuplicateSubBlockCoordinates",
    CZIChecks.BENABLED_DOCUMENT: "BenabledDocument",
    CZIChecks.SAME_PIXELTYPE_PER_CHANNEL: "SamePixeltypePerChannel",
    CZIChecks.PLANES_INDICES_START_AT_ZERO: "PlanesIndicesStartAtZero",
    CZIChecks.PLANE_INDICES_ARE_CONSECUTIVE: "PlaneIndicesAreConsecutive",
    CZIChecks.SUBBLOCKS_HAVE_MINDEX: "SubblocksHaveMindex",
    CZIChecks.BASIC_METADATA_VALIDATION: "BasicMetadataValidation",
    CZIChecks.XML_METADATA_SCHEMA_VALIDATION: "XmlMetadataSchemaValidation",
    CZIChecks.CHECK_OVERLAPPING_SCENES_ON_LAYER0: "CCheckOverlappingScenesOnLayer0",
    CZIChecks.CHECK_SUB_BLOCK_BITMAP_VALID: "CheckSubBlockBitmapValid",
    CZIChecks.CONSISTENT_M_INDEX: "ConsistentMIndex",
    CZIChecks.ATTACHMENT_DIRECTORY_POSITIONS_WITHIN_RANGE: "AttachmentDirectoryPositionsWithinRange",
    CZIChecks.APPLIANCE_METADATA_TOPOGRAPHY_ITEM_VALID: "ApplianceMetadataTopographyItemValid",
}


def czi_check_to_string(check: CZIChecks | int) -> str:
    """Return the canonical name of a check; raise ValueError for an unknown one."""
    try:
        return _CHECK_NAMES[CZIChecks(check)]
    except (ValueError, KeyError):
        raise ValueError(f"no known conversion from {check!r} to a check name") from None


@dataclass(frozen=True)
class CheckerInfo:
    """Describes one available checker."""

    check: CZIChecks
    short_name: str
    display_name: str
    is_opt_in: bool = False


class Checker(abc.ABC):
    """A checker examines a document and reports its findings."""

    @abc.abstractmethod
    def run_check(self) -> None:
        """Execute the check."""