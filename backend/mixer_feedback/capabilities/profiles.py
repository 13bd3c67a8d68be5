"""
Default capability profile.

Used while a device is still reporting its capabilities (just after connect)
and as the fallback for every field the device does not report.
"""

from .models import AudioInputSpec, CapabilityModel, ClassicAudio, InputSpec


def _default_inputs():
    inputs = [InputSpec(id=0, port_type="black")]
    inputs += [InputSpec(id=i, port_type="external") for i in range(1, 9)]
    inputs += [
        InputSpec(id=1000, port_type="colour_bars"),
        InputSpec(id=2001, port_type="colour_generator"),
        InputSpec(id=2002, port_type="colour_generator"),
    ]
    inputs += [InputSpec(id=3000 + 10 * i, port_type="media_player") for i in range(1, 5)]
    return tuple(inputs)


DEFAULT_PROFILE = CapabilityModel(
    model_id=0,
    label="Auto Detect",
    stages=4,
    keyers_per_stage=4,
    downstream_keyers=2,
    dves=1,
    super_sources=2,
    super_source_boxes=4,
    auxes=6,
    multiviewers=2,
    multiviewer_windows=10,
    macros=100,
    media_players=4,
    stills=64,
    clips=2,
    streaming=True,
    recording=True,
    inputs=_default_inputs(),
    audio=ClassicAudio(
        inputs=tuple(AudioInputSpec(id=i, port_type="external") for i in range(1, 9))
    ),
)
