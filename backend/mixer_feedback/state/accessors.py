"""
Null-safe snapshot accessors.

Every accessor returns None when the requested node is absent. Indices are
0-based and already coerced by the option schema.
"""

from typing import Optional

from .snapshot import (
    ChannelStripAudioState,
    ChannelStripSource,
    ClassicAudioChannel,
    ClassicAudioState,
    DownstreamKeyer,
    MediaPlayer,
    MixEffect,
    MultiviewerWindow,
    StateSnapshot,
    SuperSource,
    SuperSourceBox,
    UpstreamKeyer,
)


def get_mix_effect(snapshot: StateSnapshot, index: int) -> Optional[MixEffect]:
    return snapshot.video.mix_effects.get(index)


def get_usk(snapshot: StateSnapshot, me_index: int, keyer_index: int) -> Optional[UpstreamKeyer]:
    me = get_mix_effect(snapshot, me_index)
    if me is None:
        return None
    return me.upstream_keyers.get(keyer_index)


def get_dsk(snapshot: StateSnapshot, keyer_index: int) -> Optional[DownstreamKeyer]:
    return snapshot.video.downstream_keyers.get(keyer_index)


def get_super_source(snapshot: StateSnapshot, ssrc_id: int) -> Optional[SuperSource]:
    return snapshot.video.super_sources.get(ssrc_id)


def get_super_source_box(snapshot: StateSnapshot, box_index: int, ssrc_id: int = 0) -> Optional[SuperSourceBox]:
    ssrc = get_super_source(snapshot, ssrc_id)
    if ssrc is None:
        return None
    return ssrc.boxes.get(box_index)


def get_aux_source(snapshot: StateSnapshot, aux_index: int) -> Optional[int]:
    return snapshot.video.auxes.get(aux_index)


def get_multiviewer_window(snapshot: StateSnapshot, mv_index: int, window_index: int) -> Optional[MultiviewerWindow]:
    mv = snapshot.multiviewers.get(mv_index)
    if mv is None:
        return None
    return mv.windows.get(window_index)


def get_media_player(snapshot: StateSnapshot, player_index: int) -> Optional[MediaPlayer]:
    return snapshot.media.players.get(player_index)


def get_classic_audio(snapshot: StateSnapshot) -> Optional[ClassicAudioState]:
    """Classic audio state, or None if the snapshot carries another architecture."""
    if isinstance(snapshot.audio, ClassicAudioState):
        return snapshot.audio
    return None


def get_classic_audio_channel(snapshot: StateSnapshot, input_id: int) -> Optional[ClassicAudioChannel]:
    audio = get_classic_audio(snapshot)
    if audio is None:
        return None
    return audio.channels.get(input_id)


def get_channel_strip_audio(snapshot: StateSnapshot) -> Optional[ChannelStripAudioState]:
    """Channel-strip audio state, or None if the snapshot carries another architecture."""
    if isinstance(snapshot.audio, ChannelStripAudioState):
        return snapshot.audio
    return None


def get_channel_strip_source(snapshot: StateSnapshot, input_id: int, source_id: str) -> Optional[ChannelStripSource]:
    audio = get_channel_strip_audio(snapshot)
    if audio is None:
        return None
    audio_input = audio.inputs.get(input_id)
    if audio_input is None:
        return None
    return audio_input.sources.get(str(source_id))
