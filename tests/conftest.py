import pytest

from appenv.core.builder import AppBuilder


@pytest.fixture
def user_home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def working_dir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def builder(user_home, working_dir):
    """Builder isolated from the real user home and cwd."""

    def _make(app_name="test-cli-app"):
        return AppBuilder().app_name(app_name).with_user_home(user_home).with_working_directory(working_dir)

    return _make
