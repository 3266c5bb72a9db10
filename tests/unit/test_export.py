import json
from pathlib import Path

from statement_client.client.models import ParseResult
from statement_client.client.schema import validate_and_build
from statement_client.results.export import DownloadableFile, default_filename
from statement_client.results.projector import project


class TestToJson:
    def test_round_trips_to_original_result(self, parse_result: ParseResult) -> None:
        exported = project(parse_result).to_json()
        assert validate_and_build(json.loads(exported)) == parse_result

    def test_is_pretty_printed(self, parse_result: ParseResult) -> None:
        exported = project(parse_result).to_json()
        assert exported.startswith('{\n  "issuerName": "HDFC Bank"')

    def test_keeps_rupee_and_unicode_text(self) -> None:
        exported = project(ParseResult(issuer_name="Bank ₹ Café")).to_json()
        assert "Bank ₹ Café" in exported

    def test_is_stable(self, parse_result: ParseResult) -> None:
        model = project(parse_result)
        assert model.to_json() == model.to_json()


class TestClipboardAndDownload:
    def test_clipboard_matches_json(self, parse_result: ParseResult) -> None:
        model = project(parse_result)
        assert model.to_clipboard_text() == model.to_json()

    def test_download_content_matches_json(self, parse_result: ParseResult) -> None:
        model = project(parse_result)
        file = model.to_downloadable_file(timestamp_ms=1_700_000_000_000)
        assert file.content == model.to_json()
        assert file.media_type == "application/json"
        assert file.filename == "statement-HDFC-Bank-1700000000000.json"

    def test_download_with_explicit_name(self, parse_result: ParseResult) -> None:
        file = project(parse_result).to_downloadable_file("october.json")
        assert file.filename == "october.json"


class TestDefaultFilename:
    def test_missing_issuer(self) -> None:
        assert default_filename(ParseResult(), 42) == "statement-unknown-42.json"

    def test_unsafe_characters_are_replaced(self) -> None:
        result = ParseResult(issuer_name="../Axis/Bank")
        assert default_filename(result, 1) == "statement-..-Axis-Bank-1.json"

    def test_uses_current_time_by_default(self) -> None:
        name = default_filename(ParseResult(issuer_name="SBI"))
        timestamp = name.removeprefix("statement-SBI-").removesuffix(".json")
        assert timestamp.isdigit()


class TestDownloadableFileSave:
    def test_writes_into_directory(self, tmp_path: Path) -> None:
        file = DownloadableFile(filename="statement.json", content='{"a": 1}')
        path = file.save(tmp_path / "exports")
        assert path == tmp_path / "exports" / "statement.json"
        assert path.read_text(encoding="utf-8") == '{"a": 1}'
