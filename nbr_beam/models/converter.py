from __future__ import annotations

import logging
import math

from nbr_beam.models.design_inputs import ConverterInput, ConverterMode
from nbr_beam.models.materials import bar_area
from nbr_beam.models.result_types import ConverterResult

logger = logging.getLogger(__name__)

UNIT_LENGTH = 100.0  # cm


def as_per_meter_for(diameter: float, spacing: float, num_legs: int = 1) -> float:
    """Steel area per meter (cm2/m) of bars or stirrup legs at a spacing in cm."""
    return bar_area(diameter) * num_legs * UNIT_LENGTH / spacing


def truncate_spacing(spacing: float) -> float:
    """Round down to one decimal, e.g. 17.58 -> 17.5."""
    return math.floor(spacing * 10) / 10


def convert_spacing(inputs: ConverterInput) -> ConverterResult | None:
    """
    Spacing of the equivalent bar (or stirrup) keeping the steel area per meter.

    Returns None when the configuration is not computable.
    """
    stirrup = inputs.mode == ConverterMode.STIRRUP
    values = [inputs.original_diameter, inputs.original_spacing, inputs.equivalent_diameter]
    if stirrup:
        values += [inputs.original_num_legs, inputs.equivalent_num_legs]
    if any(not v or v <= 0 for v in values):
        logger.debug("Converter skipped, non-positive input: %s", inputs)
        return None

    original_legs = inputs.original_num_legs if stirrup else 1
    equivalent_legs = inputs.equivalent_num_legs if stirrup else 1

    as_per_meter = as_per_meter_for(inputs.original_diameter, inputs.original_spacing, original_legs)
    spacing = bar_area(inputs.equivalent_diameter) * equivalent_legs * UNIT_LENGTH / as_per_meter
    if inputs.truncate:
        spacing = truncate_spacing(spacing)
    if spacing <= 0:
        logger.debug("Converter skipped, spacing truncated to zero: %s", inputs)
        return None

    logger.info("Converted %.1f mm @ %.1f cm -> %.1f mm @ %.2f cm (%s)",
                inputs.original_diameter, inputs.original_spacing, inputs.equivalent_diameter,
                spacing, inputs.mode.value)
    return ConverterResult(spacing=spacing, as_per_meter=as_per_meter)
