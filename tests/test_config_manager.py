from pathlib import Path
import tempfile

from snippetvault.config_manager import ConfigManager, DEFAULT_SNIPPET_DIR


def test_defaults_live_under_home():
    with tempfile.TemporaryDirectory() as td:
        home = Path(td)
        cfg = ConfigManager(environ={}, home=home).load()
        assert cfg.storage_dir == home / DEFAULT_SNIPPET_DIR
        assert cfg.storage_dir == home / "Documents" / "myObsidianDoc" / "mysnippetsCollection"
        assert cfg.finder == "fzf"
        assert cfg.previewer == "glow"
        assert cfg.searcher == "rg"
        assert cfg.preview_style == "dark"
        assert cfg.editor == "/usr/local/bin/nvim" or cfg.editor == "nvim"


def test_editor_prefers_local_nvim_build():
    with tempfile.TemporaryDirectory() as td:
        home = Path(td)
        nvim = home / "dev" / "neovim" / "build" / "bin" / "nvim"
        nvim.parent.mkdir(parents=True)
        nvim.write_text("", encoding="utf-8")
        cfg = ConfigManager(environ={}, home=home).load()
        assert cfg.editor == str(nvim)


def test_yaml_file_overrides_defaults():
    with tempfile.TemporaryDirectory() as td:
        home = Path(td)
        config_file = home / ".config" / "snippetvault" / "config.yml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            "storage_dir: ~/vault\neditor: vim\npreviewer: bat\npreview_style: light\n",
            encoding="utf-8",
        )
        cm = ConfigManager(environ={}, home=home)
        assert cm.get_preferences()["editor"] == "vim"
        cfg = cm.load()
        assert cfg.storage_dir == home / "vault"
        assert cfg.editor == "vim"
        assert cfg.previewer == "bat"
        assert cfg.preview_style == "light"
        assert cfg.finder == "fzf"


def test_environment_beats_config_file():
    with tempfile.TemporaryDirectory() as td:
        home = Path(td)
        config_file = home / "custom.yml"
        config_file.write_text("storage_dir: /from/file\neditor: vim\n", encoding="utf-8")
        env = {
            "SNIPPETVAULT_CONFIG": str(config_file),
            "SNIPPETVAULT_DIR": str(home / "env-vault"),
            "SNIPPETVAULT_EDITOR": "hx",
        }
        cfg = ConfigManager(environ=env, home=home).load()
        assert cfg.storage_dir == home / "env-vault"
        assert cfg.editor == "hx"


def test_explicit_config_path_is_used():
    with tempfile.TemporaryDirectory() as td:
        home = Path(td)
        config_file = home / "other.yml"
        config_file.write_text("searcher: grep\n", encoding="utf-8")
        cfg = ConfigManager(config_path=config_file, environ={}, home=home).load()
        assert cfg.searcher == "grep"


def test_malformed_config_is_ignored():
    with tempfile.TemporaryDirectory() as td:
        home = Path(td)
        bad = home / "bad.yml"
        bad.write_text("storage_dir: [unclosed\n", encoding="utf-8")
        cm = ConfigManager(config_path=bad, environ={}, home=home)
        assert cm.get_preferences() == {}
        assert cm.load().storage_dir == home / DEFAULT_SNIPPET_DIR

        scalar = home / "scalar.yml"
        scalar.write_text("just a string\n", encoding="utf-8")
        assert ConfigManager(config_path=scalar, environ={}, home=home).get_preferences() == {}
