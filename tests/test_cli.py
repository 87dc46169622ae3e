from pathlib import Path

import pytest

from kb_dict.__main__ import build_parser, main
from kb_dict.config import COMPOSE_ENV_VAR, SYSTEM_COMPOSE, Settings, default_compose_path


COMPOSE = """\
# test table
<Multi_key> <a> <e>          : "æ"   ae # LATIN SMALL LETTER AE
<Multi_key> <a> <apostrophe> : "á"   aacute
<Multi_key> <o> <o>          : "°"   degree
<dead_tilde> <n>             : "ñ"   ntilde
"""

EXPECTED = """\
{
	"§" = {
		"a" = {
			"'" = ("insertText:", "á");
			"e" = ("insertText:", "æ");
		};
		"o" = {
			"o" = ("insertText:", "°");
		};
	};
}
"""


@pytest.fixture
def compose_file(tmp_path: Path) -> Path:
    path = tmp_path / "Compose"
    _ = path.write_text(COMPOSE, encoding="utf-8")
    return path


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.altgr == "§"
    assert settings.user_keysyms() == {"<Multi_key>": "§"}


def test_settings_rejects_multi_character_altgr() -> None:
    with pytest.raises(ValueError, match="altgr must be exactly one character"):
        _ = Settings(altgr="ab")


def test_default_compose_path_honours_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(COMPOSE_ENV_VAR, raising=False)
    assert default_compose_path() == SYSTEM_COMPOSE
    monkeypatch.setenv(COMPOSE_ENV_VAR, "/tmp/Compose")
    assert default_compose_path() == Path("/tmp/Compose")
    assert Settings().compose_path == Path("/tmp/Compose")


def test_main_writes_dictionary_to_stdout(compose_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(compose_file)])
    assert capsys.readouterr().out == EXPECTED


def test_main_writes_dictionary_to_file(compose_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "DefaultKeyBinding.dict"
    main([str(compose_file), "-o", str(output)])
    assert output.read_text(encoding="utf-8") == EXPECTED


def test_main_custom_altgr(compose_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(compose_file), "--altgr", "±"])
    assert capsys.readouterr().out == EXPECTED.replace("§", "±")


def test_main_dump_prefixes_source(compose_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(compose_file), "--dump"])
    assert capsys.readouterr().out == COMPOSE + EXPECTED


def test_main_reads_compose_from_environment(
    compose_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv(COMPOSE_ENV_VAR, str(compose_file))
    main([])
    assert capsys.readouterr().out == EXPECTED


def test_main_keysymdef_extends_table(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    compose = tmp_path / "Compose"
    _ = compose.write_text('<Multi_key> <kb_snowman> : "☃☃"\n', encoding="utf-8")
    keysymdef = tmp_path / "keysymdef.h"
    _ = keysymdef.write_text(
        "#define XK_kb_snowman 0x1002603  /* U+2603 SNOWMAN */\n", encoding="utf-8"
    )

    main([str(compose), "--keysymdef", str(keysymdef)])
    assert capsys.readouterr().out == '{\n\t"§" = {\n\t\t"☃" = ("insertText:", "☃☃");\n\t};\n}\n'


def test_main_rejects_bad_altgr(compose_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(compose_file), "--altgr", "ab"])
    assert excinfo.value.code == 2


def test_main_missing_compose_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing")])
    assert excinfo.value.code == 1


def test_main_syntax_error_exits(tmp_path: Path) -> None:
    compose = tmp_path / "Compose"
    _ = compose.write_text("<Multi_key> <a>\n", encoding="utf-8")
    output = tmp_path / "out.dict"
    with pytest.raises(SystemExit) as excinfo:
        main([str(compose), "-o", str(output)])
    assert excinfo.value.code == 1
    assert not output.exists()


def test_parser_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip()


def test_main_logs_errors_under_module_logger(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing")])
    assert [record.name for record in caplog.records if record.levelname == "ERROR"] == ["kb_dict.__main__"]


def test_main_resolves_non_latin1_keysyms_without_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    compose = tmp_path / "Compose"
    _ = compose.write_text('<Multi_key> <apostrophe> <Greek_alpha> : "ά" Greek_alphaaccent\n', encoding="utf-8")
    main([str(compose)])
    assert capsys.readouterr().out == '{\n\t"§" = {\n\t\t"\'" = {\n\t\t\t"α" = ("insertText:", "ά");\n\t\t};\n\t};\n}\n'
