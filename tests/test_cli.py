from __future__ import annotations

import io
from pathlib import Path

import pytest
from registry_analyzer.cli import build_parser, main

HEADER = "Name,Address,City,State,Zip,NAICS,Neighborhood,Start,End"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("REGISTRY_DATA_PATH", "REGISTRY_LOG_PATH", "REGISTRY_LOG_LEVEL",
                 "REGISTRY_STRICT_LOAD", "REGISTRY_HISTORY_SIZE"):
        monkeypatch.delenv(name, raising=False)


def _write(tmp_path: Path, *lines: str) -> Path:
    p = tmp_path / "registry.csv"
    p.write_text("\n".join([HEADER, *lines]) + "\n", encoding="utf-8")
    return p


def test_parser_accepts_list_toggle() -> None:
    args = build_parser().parse_args(["data.csv", "LL", "--lenient"])
    assert args.path == Path("data.csv")
    assert args.list_impl == "LL"
    assert args.lenient is True


def test_main_runs_shell(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "Acme,1 Main St,Springfield,IL,62704,541110,Downtown,01/15/2020,")
    monkeypatch.setattr("sys.stdin", io.StringIO("summary by naics\n541110\nquit\n"))
    main([str(path), "AL"])
    assert "Total businesses: 1" in capsys.readouterr().out


def test_main_lenient_skips_bad_lines(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(
        tmp_path,
        "Acme,1 Main St,Springfield,IL,62704,541110,Downtown,01/15/2020,",
        "Broken,1 Main St,Springfield,IL,62704,541110,Downtown,yesterday,",
    )
    monkeypatch.setattr("sys.stdin", io.StringIO("general summary\nquit\n"))
    main([str(path), "--lenient"])
    assert "Total Businesses: 1" in capsys.readouterr().out


def test_main_exits_on_parse_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "Broken,1 Main St,Springfield,IL,62704,541110,Downtown,yesterday,")
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 1


def test_main_exits_on_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.csv")])
    assert exc.value.code == 1


def test_main_requires_a_path() -> None:
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
