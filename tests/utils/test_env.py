import os
from pathlib import Path
from unittest.mock import patch

from utils.env import _find_project_root, load_project_dotenv, project_dotenv_path

# --- _find_project_root --- #


def test_find_project_root_in_start_dir(tmp_path: Path):
    start_dir = tmp_path / "checkout"
    start_dir.mkdir()
    (start_dir / "pyproject.toml").touch()

    assert _find_project_root(start=start_dir) == start_dir


def test_find_project_root_walks_upwards(tmp_path: Path):
    (tmp_path / "pyproject.toml").touch()
    start_dir = tmp_path / "analytics" / "reports"
    start_dir.mkdir(parents=True)

    assert _find_project_root(start=start_dir) == tmp_path


def test_project_dotenv_path_is_at_root():
    path = project_dotenv_path()
    assert path.name == ".env"
    assert (path.parent / "pyproject.toml").exists()


# --- load_project_dotenv --- #


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_project_dotenv_loads_existing_file(mock_find_root, mock_load_dotenv, tmp_path: Path):
    (tmp_path / "pyproject.toml").touch()
    env_file = tmp_path / ".env"
    env_file.write_text("ZEPTO_RESCALE_POLICY=conditional\n")
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is True
    mock_load_dotenv.assert_called_once_with(dotenv_path=env_file, override=False)


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_project_dotenv_missing_file(mock_find_root, mock_load_dotenv, tmp_path: Path):
    (tmp_path / "pyproject.toml").touch()
    mock_find_root.return_value = tmp_path

    assert load_project_dotenv() is False
    mock_load_dotenv.assert_not_called()


@patch("utils.env._find_project_root")
def test_load_project_dotenv_keeps_existing_environment(mock_find_root, tmp_path: Path, monkeypatch):
    (tmp_path / "pyproject.toml").touch()
    (tmp_path / ".env").write_text("ZEPTO_CHART_DIR=from_dotenv\nZEPTO_ORDERS_CSV=orders.csv\n")
    mock_find_root.return_value = tmp_path

    monkeypatch.setenv("ZEPTO_CHART_DIR", "from_shell")
    monkeypatch.delenv("ZEPTO_ORDERS_CSV", raising=False)

    load_project_dotenv()

    assert os.environ.get("ZEPTO_CHART_DIR") == "from_shell"
    assert os.environ.get("ZEPTO_ORDERS_CSV") == "orders.csv"
    # python-dotenv writes straight into os.environ; undo so other tests see a clean env
    monkeypatch.delenv("ZEPTO_ORDERS_CSV")
