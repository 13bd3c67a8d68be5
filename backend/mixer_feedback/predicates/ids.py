"""
Predicate identifiers.

Ids are persisted by the host alongside the user's option values, so they
never change once published.
"""

from enum import Enum


class FeedbackId(str, Enum):
    # Tally
    PROGRAM_TALLY = "program_tally"
    PREVIEW_TALLY = "preview_tally"

    # Preview / program
    PREVIEW_BG = "preview_bg"
    PREVIEW_BG_2 = "preview_bg_2"
    PREVIEW_BG_3 = "preview_bg_3"
    PREVIEW_BG_4 = "preview_bg_4"
    PROGRAM_BG = "program_bg"
    PROGRAM_BG_2 = "program_bg_2"
    PROGRAM_BG_3 = "program_bg_3"
    PROGRAM_BG_4 = "program_bg_4"

    # Keyers
    USK_ON_AIR = "usk_bg"
    USK_SOURCE = "usk_source"
    USK_KEY_FRAME = "usk_keyframe"
    DSK_ON_AIR = "dsk_bg"
    DSK_TIE = "dsk_tie"
    DSK_SOURCE = "dsk_source"

    # Compositor
    SSRC_ART_PROPERTIES = "ssrc_art_properties"
    SSRC_ART_SOURCE = "ssrc_art_source"
    SSRC_ART_OPTION = "ssrc_art_option"
    SSRC_BOX_ON_AIR = "ssrc_box_enable"
    SSRC_BOX_SOURCE = "ssrc_box_source"
    SSRC_BOX_PROPERTIES = "ssrc_box_properties"

    # Transitions and fade to black
    TRANSITION_STYLE = "transition_style"
    TRANSITION_SELECTION = "transition_selection"
    TRANSITION_RATE = "transition_rate"
    IN_TRANSITION = "in_transition"
    FADE_TO_BLACK_IS_BLACK = "fade_to_black_is_black"
    FADE_TO_BLACK_RATE = "fade_to_black_rate"

    # Outputs
    STREAM_STATUS = "stream_status"
    RECORD_STATUS = "record_status"

    # Classic audio
    CLASSIC_AUDIO_GAIN = "classic_audio_gain"
    CLASSIC_AUDIO_MIX_OPTION = "classic_audio_mix_option"
    CLASSIC_AUDIO_MASTER_GAIN = "classic_audio_master_gain"

    # Channel-strip audio
    CHANNEL_STRIP_AUDIO_INPUT_GAIN = "channel_strip_audio_input_gain"
    CHANNEL_STRIP_AUDIO_FADER_GAIN = "channel_strip_audio_fader_gain"
    CHANNEL_STRIP_AUDIO_MIX_OPTION = "channel_strip_audio_mix_option"
    CHANNEL_STRIP_AUDIO_MASTER_GAIN = "channel_strip_audio_master_gain"
    CHANNEL_STRIP_AUDIO_MONITOR_MASTER_MUTED = "channel_strip_audio_monitor_master_muted"
    CHANNEL_STRIP_AUDIO_MONITOR_FADER_GAIN = "channel_strip_audio_monitor_fader_gain"

    # Routing, macros, monitoring, media
    AUX_BG = "aux_bg"
    MACRO = "macro"
    MACRO_LOOP = "macro_loop"
    MV_SOURCE = "mv_source"
    MEDIA_PLAYER_SOURCE = "media_player_source"


PREVIEW_BG_BY_STAGE_COUNT = {
    2: FeedbackId.PREVIEW_BG_2,
    3: FeedbackId.PREVIEW_BG_3,
    4: FeedbackId.PREVIEW_BG_4,
}

PROGRAM_BG_BY_STAGE_COUNT = {
    2: FeedbackId.PROGRAM_BG_2,
    3: FeedbackId.PROGRAM_BG_3,
    4: FeedbackId.PROGRAM_BG_4,
}

CLASSIC_AUDIO_IDS = frozenset({
    FeedbackId.CLASSIC_AUDIO_GAIN,
    FeedbackId.CLASSIC_AUDIO_MIX_OPTION,
    FeedbackId.CLASSIC_AUDIO_MASTER_GAIN,
})

CHANNEL_STRIP_AUDIO_IDS = frozenset({
    FeedbackId.CHANNEL_STRIP_AUDIO_INPUT_GAIN,
    FeedbackId.CHANNEL_STRIP_AUDIO_FADER_GAIN,
    FeedbackId.CHANNEL_STRIP_AUDIO_MIX_OPTION,
    FeedbackId.CHANNEL_STRIP_AUDIO_MASTER_GAIN,
    FeedbackId.CHANNEL_STRIP_AUDIO_MONITOR_MASTER_MUTED,
    FeedbackId.CHANNEL_STRIP_AUDIO_MONITOR_FADER_GAIN,
})
