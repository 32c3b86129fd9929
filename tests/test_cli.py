import pytest

import portal
from portal_lib import (
    DEFAULT_CONFIG_NAME,
    OUTPUT_NAME,
    ConfigNotFoundError,
    build_portal,
    ensure_config,
    output_path_for,
    parse_config,
    resolve_config_path,
)


def test_resolve_config_path_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_config_path() == str(tmp_path / DEFAULT_CONFIG_NAME)
    assert resolve_config_path("other.yml") == str(tmp_path / "other.yml")


def test_output_path_is_next_to_config(tmp_path):
    assert output_path_for(str(tmp_path / "sub" / "links.yaml")) == str(tmp_path / "sub" / OUTPUT_NAME)


def test_ensure_config_creates_only_default_name(tmp_path):
    default = tmp_path / DEFAULT_CONFIG_NAME
    assert ensure_config(str(default)) is True
    assert parse_config(default.read_text(encoding="utf-8")).projects[0].name == "Example Project"
    assert ensure_config(str(default)) is False
    with pytest.raises(ConfigNotFoundError):
        ensure_config(str(tmp_path / "missing.yml"))


def test_build_portal_writes_index(tmp_path):
    cfg = tmp_path / "links.yml"
    cfg.write_text("projects:\n  P:\n    links:\n      L: https://example.com\n", encoding="utf-8")
    (tmp_path / OUTPUT_NAME).write_text("stale", encoding="utf-8")
    out = build_portal(str(cfg))
    assert out == str(tmp_path / OUTPUT_NAME)
    assert "<h3>P</h3>" in (tmp_path / OUTPUT_NAME).read_text(encoding="utf-8")


def test_main_success_prints_output_path(tmp_path, capsys):
    cfg = tmp_path / "links.yml"
    cfg.write_text(
        "- project: P\n  links:\n    - name: L\n      url: https://example.com\n      private: true\n      tags: [x, y]\n",
        encoding="utf-8",
    )
    assert portal.main([str(cfg)]) == 0
    out = capsys.readouterr().out
    index = tmp_path / OUTPUT_NAME
    assert str(index) in out
    page = index.read_text(encoding="utf-8")
    assert 'class="private-icon"' in page
    assert '<span class="link-tag">x</span><span class="link-tag">y</span>' in page


def test_main_missing_explicit_path_exits_1(tmp_path, capsys):
    assert portal.main([str(tmp_path / "nope.yml")]) == 1
    assert "not found" in capsys.readouterr().err
    assert not (tmp_path / OUTPUT_NAME).exists()


def test_main_parse_error_exits_1_without_output(tmp_path, capsys):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("projects:\n  P:\n    links:\n      L: {private: true}\n", encoding="utf-8")
    assert portal.main([str(cfg)]) == 1
    assert "url" in capsys.readouterr().err
    assert not (tmp_path / OUTPUT_NAME).exists()


def test_main_without_argument_creates_default(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert portal.main([]) == 0
    assert (tmp_path / DEFAULT_CONFIG_NAME).is_file()
    page = (tmp_path / OUTPUT_NAME).read_text(encoding="utf-8")
    assert page.count('class="project-card"') == 1
    assert page.count('class="link-card"') == 1
    assert "<span>Example Link</span>" in page
    assert str(tmp_path / OUTPUT_NAME) in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_exits_0_without_files(flag, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        portal.main([flag])
    assert excinfo.value.code == 0
    assert "usage: portal" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_main_invalid_utf8_exits_1_without_output(tmp_path, capsys):
    cfg = tmp_path / "links.yml"
    cfg.write_bytes(b"projects:\n  P:\n    links:\n      L: https://ex\xff.com\n")
    assert portal.main([str(cfg)]) == 1
    err = capsys.readouterr().err
    assert "Error loading or parsing YAML file" in err
    assert "invalid UTF-8" in err
    assert not (tmp_path / OUTPUT_NAME).exists()


def test_main_write_failure_exits_1(tmp_path, capsys):
    cfg = tmp_path / "links.yml"
    cfg.write_text("projects:\n  P:\n    links:\n      L: https://example.com\n", encoding="utf-8")
    (tmp_path / OUTPUT_NAME).mkdir()
    assert portal.main([str(cfg)]) == 1
    assert "Error:" in capsys.readouterr().err
    assert (tmp_path / OUTPUT_NAME).is_dir()


@pytest.mark.parametrize("argv", [["--bogus"], ["a.yml", "b.yml"]])
def test_usage_errors_exit_2(argv, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        portal.main(argv)
    assert excinfo.value.code == 2
    assert list(tmp_path.iterdir()) == []
