"""Tests for the SFV manifest writer."""

from datetime import datetime

from sfvtool import __version__
from sfvtool.parser import parse_manifest
from sfvtool.records import FileRecord, sort_records
from sfvtool.writer import render_manifest

GENERATED_AT = datetime(2009, 6, 13, 20, 20, 0)


def make_record(name, size, checksum, modified=datetime(2009, 6, 15, 20, 20, 0)):
    return FileRecord(name=name, size=size, modified_time=modified, checksum=checksum)


class TestRenderManifest:
    """Tests for render_manifest."""

    def test_full_layout(self):
        records = [
            make_record("a.bin", 5, 0x1A),
            make_record("b file.bin", 12345, 0xDEADBEEF, datetime(2020, 1, 2, 3, 4, 5)),
        ]

        text = render_manifest(records, generated_at=GENERATED_AT)

        assert text == (
            f"; Generated by sfvtool v{__version__} on 2009-06-13 at 20:20:00\r\n"
            ";\r\n"
            ";     5 20:20.00 2009-06-15 a.bin\r\n"
            "; 12345 03:04.05 2020-01-02 b file.bin\r\n"
            ";\r\n"
            "a.bin 0000001A\r\n"
            "b file.bin DEADBEEF\r\n"
        )

    def test_every_line_ends_with_crlf(self):
        text = render_manifest([make_record("x", 1, 1)], generated_at=GENERATED_AT)

        lines = text.split("\r\n")
        assert lines[-1] == ""
        assert all("\n" not in line and "\r" not in line for line in lines)

    def test_records_written_in_given_order(self):
        records = [make_record("b", 1, 2), make_record("a", 1, 1)]

        text = render_manifest(records, generated_at=GENERATED_AT)

        assert text.endswith("b 00000002\r\na 00000001\r\n")

    def test_empty_record_list(self):
        text = render_manifest([], generated_at=GENERATED_AT)

        assert text.splitlines()[1:] == [";", ";"]

    def test_default_timestamp_is_now(self):
        text = render_manifest([make_record("x", 1, 1)])

        assert f" on {datetime.now():%Y-%m-%d} at " in text.splitlines()[0]


class TestRoundTrip:
    """Rendering then parsing gives back the records."""

    def test_render_then_parse(self, tmp_path):
        records = sort_records([
            make_record("with space.txt", 10, 0xCBF43926),
            make_record("Zed", 1, 0),
            make_record("alpha", 100, 0xFFFFFFFF),
        ])
        manifest = tmp_path / "out.sfv"
        manifest.write_bytes(render_manifest(records).encode("utf-8"))

        parsed = parse_manifest(manifest)

        assert [(e.filename, e.expected_checksum) for e in parsed.entries] == [
            ("Zed", 0),
            ("alpha", 0xFFFFFFFF),
            ("with space.txt", 0xCBF43926),
        ]
        assert parsed.ignored_lines == ()
