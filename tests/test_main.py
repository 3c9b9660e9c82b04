import json
import logging
import xml.etree.ElementTree as ET

import pytest

from dividends.main import EXIT_FAILURE, EXIT_NO_FILE, EXIT_OK, NO_FILE_MESSAGE, main


class TestMain:
    def test_no_file(self, capsys):
        assert main([]) == EXIT_NO_FILE
        assert NO_FILE_MESSAGE in capsys.readouterr().out

    def test_empty_argument(self, capsys):
        assert main([""]) == EXIT_NO_FILE
        assert NO_FILE_MESSAGE in capsys.readouterr().out

    def test_default_xml_report(self, write_ledger, tmp_path):
        ledger = write_ledger("A|R1|5000000", "B|R2|20000000")

        assert main([str(ledger)]) == EXIT_OK

        root = ET.parse(tmp_path / "dividends.xml").getroot()
        assert [r.get("name") for r in root] == ["R1", "R2"]
        assert root.find("salesRepresentative/dividend").text == "50000.00"

    def test_json_output_option(self, write_ledger, tmp_path):
        ledger = write_ledger("B|R2|20000000")
        output = tmp_path / "report.json"

        assert main([str(ledger), "--format", "json", "--output", str(output)]) == EXIT_OK

        data = json.loads(output.read_text())
        assert data["representatives"][0]["dividends"][0]["dividend"] == "250000.00"

    def test_format_from_environment(self, write_ledger, tmp_path, monkeypatch):
        monkeypatch.setenv("DIVIDENDS_OUTPUT_FORMAT", "json")
        ledger = write_ledger("A|R1|1")

        assert main([str(ledger)]) == EXIT_OK
        assert (tmp_path / "dividends.json").exists()

    def test_malformed_lines_still_succeed(self, write_ledger, tmp_path, caplog):
        ledger = write_ledger("X|Y")

        with caplog.at_level(logging.WARNING):
            assert main([str(ledger)]) == EXIT_OK

        assert any("X|Y" in r.getMessage() for r in caplog.records)
        root = ET.parse(tmp_path / "dividends.xml").getroot()
        assert len(root) == 0

    def test_missing_ledger(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert main([str(tmp_path / "missing.txt")]) == EXIT_FAILURE

        assert any("missing.txt" in r.getMessage() for r in caplog.records)
        assert not (tmp_path / "dividends.xml").exists()

    def test_unknown_product(self, write_ledger, tmp_path, caplog):
        ledger = write_ledger("D|R1|1000")

        with caplog.at_level(logging.ERROR):
            assert main([str(ledger)]) == EXIT_FAILURE

        message = " ".join(r.getMessage() for r in caplog.records)
        assert "'D'" in message and "'R1'" in message
        assert not (tmp_path / "dividends.xml").exists()

    def test_unwritable_output(self, write_ledger, tmp_path, caplog):
        ledger = write_ledger("A|R1|1")

        with caplog.at_level(logging.ERROR):
            code = main([str(ledger), "--output", str(tmp_path / "nope" / "out.xml")])

        assert code == EXIT_FAILURE
        assert any("Could not export results" in r.getMessage() for r in caplog.records)

    def test_rejects_unknown_format(self, write_ledger):
        with pytest.raises(SystemExit):
            main([str(write_ledger("A|R1|1")), "--format", "yaml"])

    @pytest.mark.parametrize(
        ("variable", "value"),
        [("DIVIDENDS_OUTPUT_FORMAT", "yaml"), ("DIVIDENDS_LOG_LEVEL", "TRACE")],
    )
    def test_invalid_setting(self, write_ledger, monkeypatch, caplog, variable, value):
        monkeypatch.setenv(variable, value)

        with caplog.at_level(logging.ERROR):
            assert main([str(write_ledger("A|R1|1"))]) == EXIT_FAILURE

        message = " ".join(r.getMessage() for r in caplog.records)
        assert variable in message
        assert repr(value) in message

    def test_unknown_input_encoding(self, write_ledger, tmp_path, monkeypatch):
        monkeypatch.setenv("DIVIDENDS_INPUT_ENCODING", "no-such-codec")

        assert main([str(write_ledger("A|R1|1"))]) == EXIT_FAILURE
        assert not (tmp_path / "dividends.xml").exists()

    def test_sum_too_long_for_exact_result(self, write_ledger, tmp_path, caplog):
        ledger = write_ledger("A|R1|" + "1" * 1001)

        with caplog.at_level(logging.ERROR):
            assert main([str(ledger)]) == EXIT_FAILURE

        assert any("exact result" in r.getMessage() for r in caplog.records)
        assert not (tmp_path / "dividends.xml").exists()

    def test_long_quantities_stay_exact(self, write_ledger, tmp_path):
        ledger = write_ledger("A|R1|1" + "0" * 28, "A|R1|1")

        assert main([str(ledger)]) == EXIT_OK

        root = ET.parse(tmp_path / "dividends.xml").getroot()
        assert root.find("salesRepresentative/dividend").text == "1" + "0" * 21 + "40000.01"
