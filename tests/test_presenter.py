"""
Tests for result presentation and the demo placeholder audio.
"""

import io
import wave
import base64
import binascii

import pytest

from demo import silent_wav_bytes, silent_wav_data_uri, build_demo_result
from presenter import download_filename, is_data_uri, decode_data_uri, presentation_fields
from schemas import MusicResult


class TestDownloadFilename:

    def test_spaces_become_underscores(self):
        assert download_filename("My Song 1") == "My_Song_1.mp3"

    def test_whitespace_runs_collapse(self):
        assert download_filename("Calm \t Piano\nLoop") == "Calm_Piano_Loop.mp3"

    def test_demo_title(self):
        assert download_filename("Demo Generated Music") == "Demo_Generated_Music.mp3"


class TestDataUri:

    def test_detects_data_uri(self):
        assert is_data_uri("data:audio/wav;base64,AAAA")
        assert not is_data_uri("https://cdn.example.com/a.mp3")
        assert not is_data_uri(None)

    def test_decodes_base64_payload(self):
        encoded = base64.b64encode(b"RIFF-audio").decode("ascii")
        content, media_type = decode_data_uri(f"data:audio/wav;base64,{encoded}")
        assert content == b"RIFF-audio"
        assert media_type == "audio/wav"

    @pytest.mark.parametrize("uri", [
        "data:audio/wav;base64",
        "data:audio/wav,plain-text",
        "data:audio/wav;base64,@@not-base64@@",
    ])
    def test_rejects_malformed_uris(self, uri):
        with pytest.raises(ValueError):
            decode_data_uri(uri)

    def test_invalid_base64_keeps_cause(self):
        with pytest.raises(ValueError) as exc_info:
            decode_data_uri("data:audio/wav;base64,@@not-base64@@")
        assert isinstance(exc_info.value.__cause__, binascii.Error)


class TestDemoAudio:

    def test_silent_wav_is_valid(self):
        with wave.open(io.BytesIO(silent_wav_bytes(seconds=1, sample_rate=8000))) as wav:
            assert wav.getnchannels() == 1
            assert wav.getframerate() == 8000
            assert wav.getnframes() == 8000

    def test_data_uri_round_trips_through_presenter(self):
        content, media_type = decode_data_uri(silent_wav_data_uri())
        assert media_type == "audio/wav"
        assert content[:4] == b"RIFF"

    def test_demo_result_fields(self):
        result = build_demo_result()
        assert result.title == "Demo Generated Music"
        assert result.duration_seconds == 30
        assert result.id.startswith("demo-")
        assert result.id[len("demo-"):].isdigit()
        assert result.is_demo is True


class TestPresentationFields:

    def test_no_result(self):
        assert presentation_fields(None) == {"download_filename": None}

    def test_with_result(self):
        result = MusicResult(audio_location="x", title="Night Drive", duration_seconds=30, id="1")
        assert presentation_fields(result) == {"download_filename": "Night_Drive.mp3"}
