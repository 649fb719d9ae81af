"""Tests for the command-line entry point."""

from pathlib import Path
from textwrap import dedent

import pytest

from main import main, parse_args

HEADER_LINE = "id,title,org,location,duration,stipend,score\n"


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestParseArgs:
    def test_defaults_to_recommend(self) -> None:
        args = parse_args([])
        assert args.command == "recommend"
        assert args.skill == []
        assert args.export is None

    def test_repeatable_skill(self) -> None:
        args = parse_args(["recommend", "--skill", "python", "--skill", "nlp"])
        assert args.skill == ["python", "nlp"]

    def test_catalog_command(self) -> None:
        assert parse_args(["catalog"]).command == "catalog"


class TestRecommend:
    def test_prints_ranking_and_explanation(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["recommend", "--skill", "python", "--skill", "pandas", "--location", "Bengaluru"])
        out = capsys.readouterr().out
        assert "1. [ 22] Data Science Intern - InsightAI Pvt Ltd" in out
        assert "Skill overlap: 2 shared skills." in out
        assert "Location match: Yes." in out

    def test_explain_selected_id(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["recommend", "--skill", "python", "--location", "Bengaluru", "--explain", "4"])
        out = capsys.readouterr().out
        assert "Backend Developer Intern (ScaleStack):" in out
        assert "Location match: No." in out

    def test_explain_unknown_id(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["recommend", "--explain", "42"])
        assert exc.value.code == 1
        assert "record id 42" in capsys.readouterr().err

    def test_explain_unknown_id_prints_and_exports_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        out_path = tmp_path / "recs.csv"
        with pytest.raises(SystemExit):
            main(["recommend", "--explain", "42", "--export", "csv", "--output", str(out_path)])
        assert capsys.readouterr().out == ""
        assert not out_path.exists()

    def test_duplicate_skill_flags_deduplicated(self, tmp_path: Path) -> None:
        profile = tmp_path / "profile.yaml"
        profile.write_text("skills: [Docker]\nlocation_preference: Mumbai\n")
        out_path = tmp_path / "recs.csv"
        main([
            "recommend", "--profile", str(profile), "--skill", "docker",
            "--interests", "sql", "--export", "csv", "--output", str(out_path),
        ])
        assert out_path.read_text().splitlines()[1].endswith('"22"')

    def test_invalid_location_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["recommend", "--location", "Atlantis"])
        assert exc.value.code == 1
        assert "location must be one of" in capsys.readouterr().err

    def test_export_csv(self, tmp_path: Path) -> None:
        out_path = tmp_path / "recs.csv"
        main(["recommend", "--export", "csv", "--output", str(out_path)])
        lines = out_path.read_text().splitlines()
        assert lines[0] + "\n" == HEADER_LINE
        assert lines[1] == '"1","Frontend Developer Intern","TechBridge Labs","Remote","8 weeks","10,000 INR","2"'
        assert len(lines) == 6

    def test_export_default_path_from_settings(self, tmp_path: Path) -> None:
        main(["recommend", "--export", "csv"])
        assert (tmp_path / "intern_recommendations.csv").exists()

    def test_profile_file_with_overrides(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        profile = tmp_path / "profile.yaml"
        profile.write_text(dedent("""\
            name: Asha
            skills: [nodejs]
            location_preference: Remote
        """))
        main(["recommend", "--profile", str(profile), "--skill", "docker", "--location", "Mumbai"])
        out = capsys.readouterr().out
        assert "Recommendations for Asha" in out
        assert "1. [ 22] Backend Developer Intern" in out

    def test_missing_config_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["recommend", "--config", "nope.yaml"])
        assert exc.value.code == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_custom_catalog_and_locations(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        catalog = tmp_path / "catalog.yaml"
        catalog.write_text("- {id: 1, title: Pune Intern, location: Pune, skills: [go]}\n")
        config = tmp_path / "settings.yaml"
        config.write_text(f"catalog:\n  path: {catalog}\nprofile:\n  location_options: [Any, Pune]\n")
        main(["recommend", "--config", str(config), "--location", "Pune", "--skill", "Go"])
        assert "1. [ 12] Pune Intern" in capsys.readouterr().out

    def test_empty_catalog(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        catalog = tmp_path / "catalog.yaml"
        catalog.write_text("")
        out_path = tmp_path / "empty.csv"
        main(["recommend", "--catalog", str(catalog), "--export", "csv", "--output", str(out_path)])
        assert "No internships in the catalog." in capsys.readouterr().out
        assert out_path.read_text() == HEADER_LINE


class TestCatalogCommand:
    def test_lists_samples(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["catalog"])
        out = capsys.readouterr().out
        assert "5 internships:" in out
        assert "#3 Product Research Intern - GovTech Initiatives" in out
        assert "Locations: Remote, Bengaluru, New Delhi, Mumbai" in out

    def test_missing_catalog_file(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["catalog", "--catalog", "missing.yaml"])
        assert exc.value.code == 1
        assert "Catalog file not found" in capsys.readouterr().err
