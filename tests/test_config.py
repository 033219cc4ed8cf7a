# tests/test_config.py
"""
Profiles, workspace seeding and runtime settings.

Run: pytest -v
"""

from __future__ import annotations

import pytest

from nearprime import config, next_prime, runtime
from nearprime.runtime import APPLY, CFG, shortcut_backend, shortcut_limit, trial_limit
from nearprime.utility import U64_MAX, UserInputError
from nearprime.workspace import ensure_workspace_seeded, seed_workspace, workspace_dir

# ---------- helpers -----------------------------------------------------------


def _write_profile(name: str, text: str) -> None:
    pdir = workspace_dir() / "profiles"
    pdir.mkdir(parents=True, exist_ok=True)
    (pdir / f"{name}.toml").write_text(text, encoding="utf-8")


# ---------- workspace ---------------------------------------------------------

def test_workspace_follows_env(tmp_path):
    assert workspace_dir() == (tmp_path / "workspace").resolve()


def test_seed_copies_sample_profiles_once():
    root, seeded, copied = ensure_workspace_seeded()
    assert seeded
    assert copied["profiles"] >= 3
    assert {p.stem for p in (root / "profiles").glob("*.toml")} >= {"default", "signed", "trial"}

    _, seeded_again, copied_again = ensure_workspace_seeded()
    assert not seeded_again
    assert copied_again["profiles"] == 0


def test_seed_overwrite_restores_edited_profile():
    root, _, _ = ensure_workspace_seeded()
    default = root / "profiles" / "default.toml"
    default.write_text("[ENGINE]\nSHORTCUT = 'none'\n", encoding="utf-8")

    _, copied = seed_workspace(overwrite=True)
    assert copied["profiles"] >= 3
    assert 'SHORTCUT = "bpsw"' in default.read_text(encoding="utf-8")


# ---------- profiles ----------------------------------------------------------

def test_list_profiles_with_descriptions():
    ensure_workspace_seeded()
    assert config.list_all_profiles() == ["default", "signed", "trial"]
    names = dict(config.list_profiles_with_descriptions())
    assert names["trial"].startswith("No compositeness shortcut")


def test_load_default_profile_strips_metadata():
    ensure_workspace_seeded()
    s = config.load_settings(None)
    assert s.name == "default"
    assert "PROFILE" not in s.data
    assert s.data["ENGINE"]["SHORTCUT"] == "bpsw"
    assert s.data["ENGINE"]["TRIAL_LIMIT"] == 1_000_000
    assert s._source.name == "default.toml"


def test_profile_without_metadata_uses_file_stem():
    _write_profile("bare", "[ENGINE]\nSHORTCUT = 'sympy'\n")
    s = config.load_settings("bare")
    assert s.name == "bare"
    assert s.description == "(no description)"


def test_unknown_profile_is_user_error():
    with pytest.raises(UserInputError, match="Unknown profile 'nosuch'"):
        config.load_settings("nosuch")


def test_toml_syntax_error_reports_position():
    _write_profile("broken", "[ENGINE\nSHORTCUT = 'bpsw'\n")
    with pytest.raises(UserInputError, match=r"broken\.toml.*line 1"):
        config.load_settings("broken")


@pytest.mark.parametrize("body,match", [
    ("[ENGINE]\nSHORTCUT = 'fermat'\n", "ENGINE.SHORTCUT"),
    ("[ENGINE]\nTRIAL_LIMIT = -1\n", "ENGINE.TRIAL_LIMIT"),
    ("[ENGINE]\nSHORTCUT_LIMIT = 'big'\n", "ENGINE.SHORTCUT_LIMIT"),
])
def test_engine_section_is_validated(body, match):
    _write_profile("bad", body)
    with pytest.raises(UserInputError, match=match):
        config.load_settings("bad")


def test_current_profile_roundtrip():
    assert config.read_current_profile() is None
    config.write_current_profile("trial.toml")
    assert config.read_current_profile() == "trial"


# ---------- runtime -----------------------------------------------------------

def test_defaults_without_profile():
    assert shortcut_backend() == "bpsw"
    assert shortcut_limit() == U64_MAX
    assert trial_limit() == 1_000_000
    assert runtime.current().debug is False


def test_apply_loaded_profile():
    ensure_workspace_seeded()
    APPLY(config.load_settings("signed"))
    rt = runtime.current()
    assert rt.profile_name == "signed"
    assert shortcut_limit() == 2 ** 63 - 1
    assert trial_limit() == 0
    assert CFG("REPORT.STEPS") == 16
    assert CFG("REPORT.MISSING", "x") == "x"


def test_apply_plain_dict_and_debug_flag():
    APPLY({"ENGINE": {"SHORTCUT": "SYMPY"}, "BEHAVIOUR": {"DEBUG": True}})
    assert shortcut_backend() == "sympy"
    assert runtime.current().debug is True


def test_debug_log_only_when_enabled(capsys):
    runtime.debug_log("hidden")
    assert capsys.readouterr().err == ""
    runtime.current().debug = True
    runtime.debug_log("shown")
    assert "[debug]" in capsys.readouterr().err


def test_search_emits_debug_line(capsys):
    APPLY({"BEHAVIOUR": {"DEBUG": True}})
    assert next_prime(20) == 23
    assert "next_prime(20) = 23" in capsys.readouterr().err
