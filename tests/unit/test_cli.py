"""
Tests for the techmatch command line interface.

Commands run against JSON fixture files, so no database is needed.
"""

import json

import pytest
from typer.testing import CliRunner

from techmatch import __version__
from techmatch.cli import app

runner = CliRunner()


@pytest.fixture
def candidates_file(tmp_path, sample_profile_records):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(sample_profile_records), encoding="utf-8")
    return path


@pytest.fixture
def jobs_file(tmp_path):
    path = tmp_path / "jobs.json"
    path.write_text(
        json.dumps(
            {
                "job_postings": [
                    {"_id": "job-react", "title": "React Developer", "company_name": "Acme",
                     "required_skills": ["React", "Node.js"], "employer_id": "emp-1",
                     "created_at": "2024-01-01T00:00:00"},
                    {"_id": "job-go", "title": "Go Developer", "company_name": "Initech",
                     "required_skills": ["Go"], "employer_id": "emp-2",
                     "created_at": "2024-02-01T00:00:00"},
                    {"_id": "job-closed", "title": "Old Role", "required_skills": ["React"],
                     "status": "closed", "employer_id": "emp-1"},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


def test_version():
    result = runner.invoke(app, ["version"], catch_exceptions=False)
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_match_json(candidates_file):
    result = runner.invoke(
        app,
        ["match", "-s", "React", "-s", "Node.js", "--candidates", str(candidates_file), "--json"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    matches = json.loads(result.stdout)
    assert [m["id"] for m in matches] == ["p-1"]
    assert matches[0]["match_score"] == 100


def test_match_table(candidates_file):
    result = runner.invoke(
        app,
        ["match", "-s", "React", "--title", "Frontend", "-c", str(candidates_file)],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "Alex" in result.stdout


def test_match_nothing_above_threshold(tmp_path, sample_profile_records):
    # p-2 has no profile bonuses, so an unmatched skill leaves it at 0
    path = tmp_path / "go_only.json"
    path.write_text(json.dumps(sample_profile_records[1:2]), encoding="utf-8")
    result = runner.invoke(app, ["match", "-s", "COBOL", "-c", str(path)], catch_exceptions=False)
    assert result.exit_code == 0
    assert "No candidates matched" in result.stdout


def test_match_job_json(candidates_file, jobs_file):
    result = runner.invoke(
        app,
        ["match-job", "job-go", "-c", str(candidates_file), "-j", str(jobs_file), "--json"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    # p-2 knows Go but has an empty profile; p-1 scores on profile bonuses alone
    matches = json.loads(result.stdout)
    assert [(m["id"], m["match_score"]) for m in matches] == [("p-2", 100), ("p-1", 25)]
    assert matches[0]["full_name"] == "Anonymous"


def test_match_job_unknown_posting(candidates_file, jobs_file):
    result = runner.invoke(
        app, ["match-job", "job-missing", "-c", str(candidates_file), "-j", str(jobs_file)]
    )
    assert result.exit_code == 1
    assert "Job posting not found" in result.stdout


def test_jobs_lists_active_postings(jobs_file):
    result = runner.invoke(app, ["jobs", "--jobs", str(jobs_file)], catch_exceptions=False)
    assert result.exit_code == 0
    assert "job-go" in result.stdout
    assert "job-react" in result.stdout
    assert "job-closed" not in result.stdout


def test_jobs_for_employer_without_postings(jobs_file):
    result = runner.invoke(app, ["jobs", "emp-9", "--jobs", str(jobs_file)], catch_exceptions=False)
    assert result.exit_code == 0
    assert "No active job postings" in result.stdout


def test_recommend_json(candidates_file, jobs_file):
    result = runner.invoke(
        app,
        ["recommend", "p-1", "-c", str(candidates_file), "-j", str(jobs_file), "--json"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    recommendations = json.loads(result.stdout)
    # job-go scores 25 from profile bonuses alone; the closed posting is ignored
    assert [(r["job_id"], r["match_score"]) for r in recommendations] == [
        ("job-react", 100),
        ("job-go", 25),
    ]


def test_recommend_unknown_candidate(candidates_file, jobs_file):
    result = runner.invoke(
        app, ["recommend", "p-4", "-c", str(candidates_file), "-j", str(jobs_file)]
    )
    assert result.exit_code == 1
    assert "Candidate not found" in result.stdout


def test_match_skips_malformed_fixture_records(tmp_path, sample_profile_records):
    path = tmp_path / "profiles.json"
    records = sample_profile_records[:1] + [{"_id": "p-bad", "user_type": "candidate", "skills": 7}]
    path.write_text(json.dumps(records), encoding="utf-8")

    result = runner.invoke(
        app, ["match", "-s", "React", "-c", str(path), "--json"], catch_exceptions=False
    )
    assert result.exit_code == 0
    assert [m["id"] for m in json.loads(result.stdout)] == ["p-1"]
