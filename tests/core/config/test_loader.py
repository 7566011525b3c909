# tests/core/config/test_loader.py
"""
Testes do loader de configuração.

Os testes asseguram que:
- `DEFAULT_CONFIG` é a base de toda configuração resolvida
- o arquivo de defaults é obrigatório e o local é opcional
- overrides locais têm precedência
- raiz não-dict e formatos não suportados são rejeitados
"""

from pathlib import Path

import pytest

try:
    from sheetbind.core.config.loader import DEFAULT_CONFIG, load_config, resolve_config
    from sheetbind.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config loader. Implement:\n"
            "- src/sheetbind/core/config/loader.py (load_config, resolve_config, DEFAULT_CONFIG)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(tmp_path / "nope.yaml"))


def test_missing_local_is_ignored(tmp_path: Path, config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))
    assert out["codec"]["true_token"] == "TRUE"
    assert out["headers"]["report_extra_columns"] is False


def test_load_defaults_fills_builtin_keys(tmp_path: Path):
    """Chaves ausentes no arquivo vêm de DEFAULT_CONFIG."""
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("codec:\n  key_column: 2\n", encoding="utf-8")

    out = load_config(defaults_path=str(defaults))
    assert out["codec"]["key_column"] == 2
    assert out["codec"]["decimal_strip_pattern"] == DEFAULT_CONFIG["codec"]["decimal_strip_pattern"]
    assert out["headers"]["report_extra_columns"] is False


def test_load_defaults_and_local(tmp_path: Path, config_defaults_yaml, config_local_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(config_defaults_yaml, encoding="utf-8")
    local.write_text(config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["codec"]["true_token"] == "YES"
    assert out["codec"]["key_column"] == 0
    assert out["headers"]["report_extra_columns"] is True


def test_load_json_defaults(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.json"
    defaults.write_text('{"headers": {"report_extra_columns": true}}', encoding="utf-8")

    out = load_config(defaults_path=str(defaults))
    assert out["headers"]["report_extra_columns"] is True


def test_empty_yaml_is_empty_dict(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("", encoding="utf-8")

    assert load_config(defaults_path=str(defaults)) == DEFAULT_CONFIG


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("codec = { key_column = 0 }\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_resolve_config_does_not_mutate_defaults():
    _require_imports()
    out = resolve_config({"codec": {"true_token": "SIM"}})
    assert out["codec"]["true_token"] == "SIM"
    assert DEFAULT_CONFIG["codec"]["true_token"] == "TRUE"
    assert resolve_config(None) == DEFAULT_CONFIG


def test_resolve_config_rejects_non_dict():
    _require_imports()
    with pytest.raises(InvalidConfigRootTypeError):
        resolve_config(["codec"])
