"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli import _build_parser, _format_value, main


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")


class TestBuildParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = _build_parser().parse_args(["photo.jpg"])

        assert args.files == [Path("photo.jpg")]
        assert args.segment is False
        assert args.no_properties is False
        assert args.verbose is False

    def test_requires_a_file(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args([])


class TestFormatValue:
    """Tests for raw property value formatting."""

    def test_short_value(self) -> None:
        assert _format_value("Canon") == "Canon"

    def test_newlines_flattened(self) -> None:
        assert _format_value("a\nb") == "a b"

    def test_long_value_truncated(self) -> None:
        assert _format_value("x" * 150) == "x" * 100 + "..."


class TestMain:
    """Tests for the main entry point."""

    def test_prints_tags_and_properties(self, jpg_with_xmp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        status = main([str(jpg_with_xmp)])

        out = capsys.readouterr().out
        assert status == 0
        assert "[Xmp] Make - Canon" in out
        assert "[Xmp] F-Number - f/4.0" in out
        assert "[Xmp] Exposure Program - Program normal" in out
        assert "dc:subject[1] = landscape" in out

    def test_no_properties_flag(self, jpg_with_xmp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(jpg_with_xmp), "--no-properties"])

        out = capsys.readouterr().out
        assert "[Xmp] Make - Canon" in out
        assert "Properties:" not in out

    def test_jpg_without_xmp(self, sample_jpg: Path, capsys: pytest.CaptureFixture[str]) -> None:
        status = main([str(sample_jpg)])

        assert status == 0
        assert "No XMP data found." in capsys.readouterr().out

    def test_missing_file(self, temp_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        status = main([str(temp_dir / "missing.jpg")])

        assert status == 1
        assert "does not exist" in capsys.readouterr().err

    def test_unreadable_image(self, temp_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = temp_dir / "broken.jpg"
        path.write_bytes(b"not an image")

        status = main([str(path)])

        assert status == 1
        assert "Error:" in capsys.readouterr().err

    def test_segment_mode(self, temp_dir: Path, camera_segment: bytes, capsys: pytest.CaptureFixture[str]) -> None:
        path = temp_dir / "segment.bin"
        path.write_bytes(camera_segment)

        status = main([str(path), "--segment"])

        assert status == 0
        assert "[Xmp] Model - Canon EOS 5D Mark II" in capsys.readouterr().out

    def test_recorded_errors_set_exit_status(
        self, temp_dir: Path, segment_factory, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = temp_dir / "segment.bin"
        path.write_bytes(segment_factory("   <exif:FNumber>bad</exif:FNumber>"))

        status = main([str(path), "--segment"])

        captured = capsys.readouterr()
        assert status == 1
        assert "Error in rational format for tag 5" in captured.err
        assert "exif:FNumber = bad" in captured.out

    def test_out_of_range_apex_value_is_printed_as_fraction(
        self, temp_dir: Path, segment_factory, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = temp_dir / "segment.bin"
        path.write_bytes(segment_factory("   <exif:ShutterSpeedValue>100000/1</exif:ShutterSpeedValue>"))

        status = main([str(path), "--segment"])

        assert status == 0
        assert "[Xmp] Shutter Speed Value - 100000/1" in capsys.readouterr().out

    def test_unsupported_suffix_warns(self, sample_png: Path, capsys: pytest.CaptureFixture[str]) -> None:
        status = main([str(sample_png)])

        captured = capsys.readouterr()
        assert status == 0
        assert "may not be a supported format" in captured.err
        assert "No XMP data found." in captured.out

    def test_worst_status_wins(
        self, jpg_with_xmp: Path, temp_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        status = main([str(jpg_with_xmp), str(temp_dir / "missing.jpg")])

        assert status == 1
