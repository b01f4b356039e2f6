import json

import pytest

from jd_parser.db import DocumentStore
from jd_parser.jobs import list_jobs
from jd_parser.main import EXIT_INVALID, EXIT_PARSE_FAILED, cli, parse_args, run


@pytest.fixture
def jd_file(tmp_path, sample_text):
    path = tmp_path / "backend.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


def test_parse_args_defaults():
    args = parse_args(["jd.pdf"])
    assert args.file == "jd.pdf"
    assert args.content_type is None
    assert args.validate is False
    assert args.post is False
    assert args.db is None


def test_parse_args_post_requires_recruiter():
    with pytest.raises(SystemExit):
        parse_args(["jd.pdf", "--post"])


@pytest.mark.asyncio
async def test_run_prints_parse_result(jd_file, capsys):
    exit_code = await run(parse_args([str(jd_file)]))

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output["result"]["success"] is True
    assert output["result"]["data"]["title"] == "Senior Backend Engineer"
    assert "validation" not in output


@pytest.mark.asyncio
async def test_run_with_validation(jd_file, capsys):
    exit_code = await run(parse_args([str(jd_file), "--validate"]))

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output["validation"] == {"isValid": True, "errors": []}


@pytest.mark.asyncio
async def test_run_unsupported_file(tmp_path, capsys):
    path = tmp_path / "logo.png"
    path.write_bytes(b"\x89PNG")

    exit_code = await run(parse_args([str(path)]))

    output = json.loads(capsys.readouterr().out)
    assert exit_code == EXIT_PARSE_FAILED
    assert output["result"]["success"] is False
    assert output["result"]["data"] is None


@pytest.mark.asyncio
async def test_run_posts_valid_job(jd_file, tmp_path, capsys):
    db_path = str(tmp_path / "portal.db")

    exit_code = await run(
        parse_args([str(jd_file), "--post", "--recruiter-id", "rec-9", "--db", db_path])
    )

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    with DocumentStore(db_path=db_path) as store:
        jobs = list_jobs(store)
    assert [job["id"] for job in jobs] == [output["jobId"]]
    assert jobs[0]["companyName"] == "Acme Technologies"
    assert jobs[0]["recruiterId"] == "rec-9"
    assert jobs[0]["jobType"] == "Full-time"


@pytest.mark.asyncio
async def test_run_refuses_to_post_invalid_job(tmp_path, capsys):
    path = tmp_path / "short.txt"
    path.write_text("Role: QA", encoding="utf-8")
    db_path = str(tmp_path / "portal.db")

    exit_code = await run(
        parse_args([str(path), "--post", "--recruiter-id", "rec-9", "--db", db_path])
    )

    output = json.loads(capsys.readouterr().out)
    assert exit_code == EXIT_INVALID
    assert output["validation"]["isValid"] is False
    assert "jobId" not in output


def test_cli_exits_with_run_code(jd_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli([str(jd_file)])
    assert exc_info.value.code == 0
    assert json.loads(capsys.readouterr().out)["result"]["success"] is True
