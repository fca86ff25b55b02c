"""Tests for picking the audio rendition out of a video's formats."""
from __future__ import annotations

import pytest

from src.errors import NoCompatibleAudioFormat
from src.models.media import Rendition
from src.resolver.selection import compatible_renditions, select_audio_rendition
from tests.helpers import rendition


class TestSelectAudioRendition:
    def test_highest_bitrate_wins(self):
        formats = [rendition(64), rendition(128), rendition(96)]
        assert select_audio_rendition(formats).abr == 128

    def test_tie_keeps_provider_order(self):
        first = rendition(128, url="https://media.example/first.m4a")
        second = rendition(128, url="https://media.example/second.m4a")
        assert select_audio_rendition([first, second]) is first

    def test_missing_bitrate_ranks_as_zero(self):
        unknown = rendition(None, url="https://media.example/unknown.m4a")
        known = rendition(48)
        assert select_audio_rendition([unknown, known]) is known
        assert select_audio_rendition([unknown]) is unknown

    def test_video_only_and_webm_are_skipped(self):
        video_only = rendition(999, acodec="none", ext="mp4")
        no_codec = rendition(500, acodec=None)
        opus = rendition(160, acodec="opus", ext="webm")
        aac = rendition(128)
        assert select_audio_rendition([video_only, no_codec, opus, aac]) is aac

    def test_mime_type_counts_as_m4a(self):
        dash = rendition(140, ext="mp4", mime_type='audio/mp4; codecs="mp4a.40.2"')
        assert compatible_renditions([dash]) == [dash]

    def test_no_compatible_format(self):
        with pytest.raises(NoCompatibleAudioFormat):
            select_audio_rendition([rendition(160, acodec="opus", ext="webm")])

    def test_empty_list(self):
        with pytest.raises(NoCompatibleAudioFormat):
            select_audio_rendition([])


class TestRenditionFromFormat:
    def test_reads_yt_dlp_fields(self):
        r = Rendition.from_format(
            {
                "format_id": "140",
                "url": "https://media.example/140",
                "acodec": "mp4a.40.2",
                "ext": "m4a",
                "abr": 129.5,
            }
        )
        assert r.format_id == "140"
        assert r.bitrate == 129.5
        assert r.has_audio and r.is_m4a

    def test_non_numeric_abr_is_ignored(self):
        r = Rendition.from_format({"url": "u", "acodec": "aac", "ext": "m4a", "abr": "n/a"})
        assert r.abr is None
        assert r.bitrate == 0.0
