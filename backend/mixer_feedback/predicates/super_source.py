"""
Compositor ("supersource") predicates.

Analog box and art values are compared with the quantized comparators. Learn
reports values already quantized the way evaluate rounds the device value,
so a learned option set always re-matches.

Devices with a single compositor have no ``ssrc_id`` option; compositor 0 is
used.
"""

from typing import List

from ..capabilities import CapabilityModel
from ..comparators import compare_as_int, quantize
from ..options import OptionSchema
from ..options.pickers import (
    art_option_picker,
    source_picker,
    super_source_art_properties_pickers,
    super_source_box_picker,
    super_source_box_properties_pickers,
    super_source_id_picker,
)
from ..state import ArtOption, get_super_source, get_super_source_box
from .definition import STATUS_HINT, PredicateDefinition
from .ids import FeedbackId

_ART_OPTIONS = frozenset(option.value for option in ArtOption)

# option id -> (device scale, device rounding quantum)
ART_SCALES = {
    "art_clip": (10, 1),
    "art_gain": (10, 1),
}

BOX_SCALES = {
    "size": (1000, 10),
    "x": (100, 1),
    "y": (100, 1),
}

CROP_SCALES = {
    "crop_top": (1000, 10),
    "crop_bottom": (1000, 10),
    "crop_left": (1000, 10),
    "crop_right": (1000, 10),
}


def _learned_value(actual: int, scale: int, rounding: int) -> float:
    return quantize(actual, rounding) / scale


def _ssrc_resolver(model: CapabilityModel):
    if model.super_sources > 1:
        return lambda opts: opts.ssrc_id
    return lambda opts: 0


def super_source_predicates(model: CapabilityModel) -> List[PredicateDefinition]:
    if not model.super_sources:
        return []

    ssrc_of = _ssrc_resolver(model)

    def art_properties(state, opts):
        ssrc = get_super_source(state, ssrc_of(opts))
        return ssrc.properties if ssrc is not None else None

    def box(state, opts):
        return get_super_source_box(state, opts.box_index, ssrc_of(opts))

    # ------------------------------------------------------------------
    # Art
    # ------------------------------------------------------------------

    def evaluate_art_properties(state, opts) -> bool:
        props = art_properties(state, opts)
        if props is None:
            return False

        wanted = set(opts.properties)
        if "fill" in wanted and props.art_fill_source != opts.fill:
            return False
        if "key" in wanted and props.art_cut_source != opts.key:
            return False
        if "art_option" in wanted and props.art_option != opts.art_option:
            return False
        if "art_pre_multiplied" in wanted and props.art_pre_multiplied != opts.art_pre_multiplied:
            return False
        for option_id, (scale, rounding) in ART_SCALES.items():
            if option_id in wanted and not compare_as_int(getattr(opts, option_id), getattr(props, option_id), scale, rounding):
                return False
        if "art_invert_key" in wanted and props.art_invert_key != opts.art_invert_key:
            return False
        return True

    def learn_art_properties(state, opts):
        props = art_properties(state, opts)
        if props is None or props.art_option not in _ART_OPTIONS:
            return None
        learned = {
            "fill": props.art_fill_source,
            "key": props.art_cut_source,
            "art_option": props.art_option,
            "art_pre_multiplied": props.art_pre_multiplied,
            "art_invert_key": props.art_invert_key,
        }
        for option_id, (scale, rounding) in ART_SCALES.items():
            learned[option_id] = _learned_value(getattr(props, option_id), scale, rounding)
        return learned

    def evaluate_art_source(state, opts) -> bool:
        props = art_properties(state, opts)
        return props is not None and props.art_fill_source == opts.source

    def learn_art_source(state, opts):
        props = art_properties(state, opts)
        if props is None:
            return None
        return {"source": props.art_fill_source}

    def evaluate_art_option(state, opts) -> bool:
        props = art_properties(state, opts)
        return props is not None and props.art_option == opts.art_option

    def learn_art_option(state, opts):
        props = art_properties(state, opts)
        if props is None or props.art_option not in _ART_OPTIONS:
            return None
        return {"art_option": props.art_option}

    # ------------------------------------------------------------------
    # Boxes
    # ------------------------------------------------------------------

    def evaluate_box_source(state, opts) -> bool:
        current = box(state, opts)
        return current is not None and current.source == opts.source

    def learn_box_source(state, opts):
        current = box(state, opts)
        if current is None:
            return None
        return {"source": current.source}

    def evaluate_box_on_air(state, opts) -> bool:
        current = box(state, opts)
        return bool(current is not None and current.enabled)

    def evaluate_box_properties(state, opts) -> bool:
        current = box(state, opts)
        if current is None:
            return False

        wanted = set(opts.properties)
        if "source" in wanted and current.source != opts.source:
            return False
        for option_id, (scale, rounding) in BOX_SCALES.items():
            if option_id in wanted and not compare_as_int(getattr(opts, option_id), getattr(current, option_id), scale, rounding):
                return False
        if "crop_enable" in wanted and current.cropped != opts.crop_enable:
            return False
        # Crop values only mean something while cropping is enabled
        if current.cropped:
            for option_id, (scale, rounding) in CROP_SCALES.items():
                if option_id in wanted and not compare_as_int(getattr(opts, option_id), getattr(current, option_id), scale, rounding):
                    return False
        return True

    def learn_box_properties(state, opts):
        current = box(state, opts)
        if current is None:
            return None
        learned = {"source": current.source, "crop_enable": current.cropped}
        for option_id, (scale, rounding) in {**BOX_SCALES, **CROP_SCALES}.items():
            learned[option_id] = _learned_value(getattr(current, option_id), scale, rounding)
        return learned

    ssrc_picker = super_source_id_picker(model)

    predicates = [
        PredicateDefinition(
            id=FeedbackId.SSRC_ART_PROPERTIES,
            label="Supersource: Art properties",
            description="If the specified SuperSource art properties match, change style of the bank",
            options=OptionSchema(
                FeedbackId.SSRC_ART_PROPERTIES.value,
                [ssrc_picker, *super_source_art_properties_pickers(model)],
            ),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_art_properties,
            learn_fn=learn_art_properties,
        ),
        PredicateDefinition(
            id=FeedbackId.SSRC_ART_SOURCE,
            label="Supersource: Art fill source",
            description="If the specified SuperSource art fill is set to the specified source, change style of the bank",
            options=OptionSchema(
                FeedbackId.SSRC_ART_SOURCE.value,
                [ssrc_picker, source_picker(model, option_id="source", label="Fill Source")],
            ),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_art_source,
            learn_fn=learn_art_source,
        ),
        PredicateDefinition(
            id=FeedbackId.SSRC_ART_OPTION,
            label="Supersource: Art placement",
            description="If the specified SuperSource art is placed in the foreground/background, change style of the bank",
            options=OptionSchema(FeedbackId.SSRC_ART_OPTION.value, [ssrc_picker, art_option_picker()]),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_art_option,
            learn_fn=learn_art_option,
        ),
    ]

    if not model.super_source_boxes:
        return predicates

    predicates += [
        PredicateDefinition(
            id=FeedbackId.SSRC_BOX_SOURCE,
            label="Supersource: Box source",
            description="If the specified SuperSource box is set to the specified source, change style of the bank",
            options=OptionSchema(
                FeedbackId.SSRC_BOX_SOURCE.value,
                [ssrc_picker, super_source_box_picker(model), source_picker(model, option_id="source", label="Source")],
            ),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_box_source,
            learn_fn=learn_box_source,
        ),
        PredicateDefinition(
            id=FeedbackId.SSRC_BOX_ON_AIR,
            label="Supersource: Box state",
            description="If the specified SuperSource box is enabled, change style of the bank",
            options=OptionSchema(FeedbackId.SSRC_BOX_ON_AIR.value, [ssrc_picker, super_source_box_picker(model)]),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_box_on_air,
        ),
        PredicateDefinition(
            id=FeedbackId.SSRC_BOX_PROPERTIES,
            label="Supersource: Box properties",
            description="If the specified SuperSource box properties match, change style of the bank",
            options=OptionSchema(
                FeedbackId.SSRC_BOX_PROPERTIES.value,
                [ssrc_picker, super_source_box_picker(model), *super_source_box_properties_pickers(model)],
            ),
            hint=STATUS_HINT,
            evaluate_fn=evaluate_box_properties,
            learn_fn=learn_box_properties,
        ),
    ]
    return predicates
