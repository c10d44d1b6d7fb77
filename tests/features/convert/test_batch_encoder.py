"""Tests for the batch encode driver using a recording fake encoder."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagsync.features.convert import BatchEncoder, EncoderPort, select_inputs, target_path
from tagsync.shared.errors import EncodeError, EncoderNotInstalledError, NoMatchingInputError


class RecordingEncoder:
    """Fake encoder that records probes and conversions."""

    def __init__(self, *, installed: bool = True, fail_on: str | None = None) -> None:
        self.installed = installed
        self.fail_on = fail_on
        self.probes = 0
        self.calls: list[tuple[Path, Path]] = []

    def probe(self) -> None:
        self.probes += 1
        if not self.installed:
            raise EncoderNotInstalledError("fake-encoder")

    def encode(self, source: Path, destination: Path) -> None:
        self.calls.append((source, destination))
        if self.fail_on is not None and source.name == self.fail_on:
            raise EncodeError(f"cannot encode {source}")


def test_fake_satisfies_port() -> None:
    assert isinstance(RecordingEncoder(), EncoderPort)


def test_target_path_replaces_extension() -> None:
    assert target_path(Path("dir/track.wav")) == Path("dir/track.flac")


def test_select_inputs_filters_by_extension() -> None:
    selected = select_inputs(["a.wav", "b.flac", "c.WAV", "d.wav.txt", Path("e.wav")])

    assert selected == [Path("a.wav"), Path("e.wav")]


def test_converts_each_wav_beside_original() -> None:
    encoder = RecordingEncoder()

    written = BatchEncoder(encoder).run(["music/track.wav", "music/notes.txt", "other/2.wav"])

    assert encoder.probes == 1
    assert encoder.calls == [
        (Path("music/track.wav"), Path("music/track.flac")),
        (Path("other/2.wav"), Path("other/2.flac")),
    ]
    assert written == [Path("music/track.flac"), Path("other/2.flac")]


@pytest.mark.parametrize("inputs", [[], ["a.flac", "b.mp3"]])
def test_no_matching_input_is_an_error(inputs: list[str]) -> None:
    encoder = RecordingEncoder()

    with pytest.raises(NoMatchingInputError):
        _ = BatchEncoder(encoder).run(inputs)

    assert encoder.calls == []


def test_missing_encoder_stops_before_any_conversion() -> None:
    encoder = RecordingEncoder(installed=False)

    with pytest.raises(EncoderNotInstalledError, match="must be installed"):
        _ = BatchEncoder(encoder).run(["a.wav", "b.wav"])

    assert encoder.calls == []


def test_encode_failure_aborts_remaining() -> None:
    encoder = RecordingEncoder(fail_on="b.wav")

    with pytest.raises(EncodeError):
        _ = BatchEncoder(encoder).run(["a.wav", "b.wav", "c.wav"])

    assert [source.name for source, _ in encoder.calls] == ["a.wav", "b.wav"]
