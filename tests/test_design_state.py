from nbr_beam.models.design_inputs import (
    AggressivenessClass,
    AnchorageInput,
    BarType,
    ConverterMode,
    FlexureInput,
)
from nbr_beam.models.result_types import FlexureStatus
from nbr_beam.ui.design_state import (
    FLEXURE_AGGRESSIVENESS_KEY,
    default_cover_for,
    design_flexure,
    get_design_snapshot,
    init_design_state,
    reset_design_inputs,
    seed_widget_state,
    update_design_inputs,
)


def test_design_state_snapshot_updates_consistently():
    session_state: dict[str, object] = {}
    init_design_state(session_state)
    update_design_inputs(session_state, "flexure", mk=12.0, bw=25.0)
    snap = get_design_snapshot(session_state, "flexure")

    assert isinstance(snap, FlexureInput)
    assert snap.mk == 12.0
    assert snap.bw == 25.0
    assert snap.h == 50.0


def test_snapshot_rebuilds_enums():
    session_state: dict[str, object] = {}
    update_design_inputs(session_state, "anchorage", bar_type="CA-25")
    update_design_inputs(session_state, "converter", mode="stirrup")

    anchorage = get_design_snapshot(session_state, "anchorage")
    converter = get_design_snapshot(session_state, "converter")
    assert isinstance(anchorage, AnchorageInput)
    assert anchorage.bar_type == BarType.CA25
    assert converter.mode == ConverterMode.STIRRUP


def test_reset_restores_defaults():
    session_state: dict[str, object] = {}
    update_design_inputs(session_state, "flexure", mk=30.0)
    session_state["force_double_reinforcement"] = True
    reset_design_inputs(session_state, "flexure")

    assert get_design_snapshot(session_state, "flexure") == FlexureInput()
    assert session_state["force_double_reinforcement"] is False


def test_reset_restores_bound_widgets():
    session_state: dict[str, object] = {}
    seed_widget_state(session_state, "flexure")
    assert session_state["flex_mk"] == 8.0
    assert session_state[FLEXURE_AGGRESSIVENESS_KEY] == AggressivenessClass.CAA2.value

    session_state["flex_mk"] = 3.0
    session_state["flex_cover"] = 5.0
    session_state[FLEXURE_AGGRESSIVENESS_KEY] = AggressivenessClass.CAA4.value
    update_design_inputs(session_state, "flexure", mk=3.0, cover=5.0)
    reset_design_inputs(session_state, "flexure")

    assert session_state["flex_mk"] == 8.0
    assert session_state["flex_cover"] == 3.0
    assert session_state[FLEXURE_AGGRESSIVENESS_KEY] == AggressivenessClass.CAA2.value
    assert get_design_snapshot(session_state, "flexure").mk == 8.0


def test_seed_keeps_existing_widget_values():
    session_state: dict[str, object] = {"flex_bw": 30.0}
    seed_widget_state(session_state, "flexure")
    assert session_state["flex_bw"] == 30.0
    assert session_state["flex_h"] == 50.0


def test_default_cover_by_aggressiveness():
    assert default_cover_for(AggressivenessClass.CAA1) == 2.5
    assert default_cover_for(AggressivenessClass.CAA2) == 3.0
    assert default_cover_for(AggressivenessClass.CAA4) == 5.0


def test_design_flexure_retries_with_compression_steel_on_request():
    inputs = FlexureInput(mk=20)
    assert design_flexure(inputs, force_double_reinforcement=False).status == FlexureStatus.ERROR_X_D_LIMIT
    assert design_flexure(inputs, force_double_reinforcement=True).status == FlexureStatus.SUCCESS_COMPRESSION_STEEL


def test_design_flexure_insufficient_section_stays_rejected():
    res = design_flexure(FlexureInput(mk=25), force_double_reinforcement=True)
    assert res.status == FlexureStatus.ERROR_X_D_LIMIT
