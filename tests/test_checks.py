import pytest

from czivalidate.checks import Checker, CheckerInfo, CZIChecks, czi_check_to_string


def test_known_names():
    assert (
        czi_check_to_string(CZIChecks.SUB_BLOCK_DIRECTORY_POSITIONS_WITHIN_RANGE)
        == "SubBlockDirectoryPositionsWithinRange"
    )
    assert (
        czi_check_to_string(CZIChecks.CHECK_OVERLAPPING_SCENES_ON_LAYER0)
        == "CCheckOverlappingScenesOnLayer0"
    )
    assert (
        czi_check_to_string(CZIChecks.APPLIANCE_METADATA_TOPOGRAPHY_ITEM_VALID)
        == "ApplianceMetadataTopographyItemValid"
    )


def test_every_check_has_a_unique_name():
    names = [czi_check_to_string(c) for c in CZIChecks]
    assert len(set(names)) == len(CZIChecks)


def test_str_uses_canonical_name():
    check = CZIChecks.BENABLED_DOCUMENT
    assert str(check) == czi_check_to_string(check) == "BenabledDocument"


def test_int_accepted():
    assert czi_check_to_string(4) == "BenabledDocument"


def test_unknown_check_raises():
    with pytest.raises(ValueError):
        czi_check_to_string(999)


def test_order_follows_declaration():
    checks = sorted([CZIChecks.CONSISTENT_M_INDEX, CZIChecks.SUB_BLOCK_DIRECTORY_SEGMENT_VALID])
    names = [czi_check_to_string(c) for c in checks]
    assert names == ["SubBlockDirectorySegmentValid", "ConsistentMIndex"]


def test_checker_info_is_immutable():
    info = CheckerInfo(CZIChecks.BENABLED_DOCUMENT, "benabled", "Benabled", True)
    assert info.is_opt_in is True
    with pytest.raises(AttributeError):
        info.short_name = "other"


def test_checker_requires_run_check():
    with pytest.raises(TypeError):
        Checker()

    class Incomplete(Checker):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_checker_subclass_runs():
    class Recording(Checker):
        def __init__(self, check):
            self.check = check
            self.ran = []

        def run_check(self):
            self.ran.append(self.check)

    checker = Recording(CZIChecks.BENABLED_DOCUMENT)
    checker.run_check()
    checker.run_check()
    names = [czi_check_to_string(check) for check in checker.ran]
    assert names == ["BenabledDocument", "BenabledDocument"]
    assert checker.ran == [CZIChecks.BENABLED_DOCUMENT, CZIChecks.BENABLED_DOCUMENT]