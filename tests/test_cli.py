"""Tests for the command line interface."""

import json
import pytest
from pestwatch.presentation.cli.main import main


def test_assess_json(capsys):
    """Test assessing one reading from flags."""
    rc = main(["assess", "--temperature", "35", "--humidity", "90", "--condition", "Rain", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["riskLevel"] == "Critical"
    assert data["badge"] == "destructive"


def test_assess_text(capsys):
    """Test the human-readable report."""
    rc = main(["assess", "--temperature", "20", "--humidity", "40", "--condition", "Clear"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Risk level: Low (secondary)" in out
    assert "Current conditions are favorable for crop health" in out


def test_assess_from_file(tmp_path, capsys):
    """Test assessing a JSON file."""
    payload = tmp_path / "reading.json"
    payload.write_text(json.dumps({"temperature": 28, "humidity": 75, "condition": "Clouds", "windSpeed": 3.5}))
    rc = main(["assess", "--input", str(payload), "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["riskLevel"] == "High"
    assert "Thrips" in data["pestTypes"]


def test_assess_invalid_input(tmp_path):
    """Test invalid input exits with status 1."""
    payload = tmp_path / "reading.json"
    payload.write_text(json.dumps({"temperature": "hot", "humidity": 75, "condition": "Clouds"}))
    assert main(["assess", "--input", str(payload)]) == 1


def test_assess_demo_on_error(tmp_path, capsys):
    """Test invalid input falls back to demo data when asked."""
    payload = tmp_path / "reading.json"
    payload.write_text(json.dumps({"humidity": 75}))
    rc = main(["assess", "--input", str(payload), "--json", "--demo-on-error"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["riskLevel"] == "High"


def test_assess_requires_reading():
    """Test assess without enough flags is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["assess", "--temperature", "20"])
    assert exc_info.value.code == 2


def test_batch(tmp_path, capsys):
    """Test batch assessment with export."""
    data_file = tmp_path / "readings.csv"
    data_file.write_text("temperature,humidity,condition\n28,75,Clouds\n,40,Clear\n")
    output = tmp_path / "out.csv"
    rc = main(["batch", "--input", str(data_file), "--output", str(output)])
    assert rc == 0
    assert output.exists()
    assert "Readings: 2 | Invalid: 1" in capsys.readouterr().out


def test_batch_missing_file(tmp_path):
    """Test a missing batch file exits with status 1."""
    assert main(["batch", "--input", str(tmp_path / "missing.csv")]) == 1


def test_badge(capsys):
    """Test the badge command."""
    assert main(["badge", "High"]) == 0
    assert capsys.readouterr().out.strip() == "destructive"
