import dataclasses

import pytest

from nbr_beam.models.result_types import (
    AnchorageStatus,
    FlexureDesign,
    FlexureDoublyReinforced,
    FlexureRejected,
    FlexureStatus,
    ShearDesign,
    ShearStatus,
    TraceCheck,
    status_code_for,
)


@pytest.mark.parametrize("status, code", [
    (FlexureStatus.SUCCESS, "ok"),
    (FlexureStatus.SUCCESS_COMPRESSION_STEEL, "ok"),
    (FlexureStatus.WARNING_MIN_STEEL, "warning"),
    (FlexureStatus.ERROR_X_D_LIMIT, "error"),
    (ShearStatus.ERROR_VRD2, "error"),
    (AnchorageStatus.ERROR_INPUT, "error"),
])
def test_status_code(status, code):
    assert status_code_for(status) == code


def test_variant_rejects_foreign_status():
    with pytest.raises(ValueError):
        FlexureDesign(status=FlexureStatus.ERROR_INPUT, message="")
    with pytest.raises(ValueError):
        FlexureDesign(status=FlexureStatus.SUCCESS_COMPRESSION_STEEL, message="")
    with pytest.raises(ValueError):
        ShearDesign(status=ShearStatus.ERROR_VRD2, message="")


def test_doubly_reinforced_flag():
    assert not FlexureDesign(status=FlexureStatus.SUCCESS, message="").doubly_reinforced
    assert FlexureDoublyReinforced(status=FlexureStatus.SUCCESS_COMPRESSION_STEEL, message="").doubly_reinforced


def test_mapping_protocol():
    check = TraceCheck("Input Policy", "INPUT_VALIDATION", {}, 1.0, "errors", "error", "bw")
    res = FlexureRejected(status=FlexureStatus.ERROR_INPUT, message="bad", trace=(check,))

    assert res["status"] == "error_input"
    assert res["status_code"] == "error"
    assert res.get("As", "missing") == "missing"
    assert res["trace"][0]["formula_id"] == "INPUT_VALIDATION"
    assert len(res) == 4
    assert sorted(res) == ["message", "status", "status_code", "trace"]


def test_results_are_immutable():
    res = FlexureDesign(status=FlexureStatus.SUCCESS, message="", As=1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        res.As = 2.0
