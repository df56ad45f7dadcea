from pathlib import Path

import pytest

from appenv.core import cleanup
from appenv.core.context import AppContext
from appenv.core.errors import DeletionFailed, DirectoryMissing, PropertyReadFailed, PropertyWriteFailed
from appenv.core.tier import Tier


def test_home_properties_require_home_directory(builder):
    app = builder().build()

    with pytest.raises(DirectoryMissing) as excinfo:
        app.save_home_properties({"foo": "bar"})
    assert excinfo.value.tier is Tier.HOME
    assert excinfo.value.path == app.home_dir

    with pytest.raises(DirectoryMissing):
        app.load_home_properties()


def test_local_properties_require_local_directory(builder):
    app = builder().build()

    with pytest.raises(DirectoryMissing) as excinfo:
        app.save_local_properties({"baz": "qux"})
    assert excinfo.value.tier is Tier.LOCAL

    with pytest.raises(DirectoryMissing):
        app.load_local_properties()


def test_operations_never_create_directories(builder):
    app = builder().build()

    with pytest.raises(DirectoryMissing):
        app.save_local_properties({"a": "b"})

    assert not app.local_dir.exists()


def test_save_and_load_home_properties(builder):
    app = builder().with_home_directory().build()

    app.save_home_properties({"foo": "bar"})

    assert app.load_home_properties() == {"foo": "bar"}
    assert app.home_properties_file.is_file()


def test_save_and_load_local_properties(builder):
    app = builder().with_local_directory().build()

    app.save_local_properties({"baz": "qux"})

    assert app.load_local_properties() == {"baz": "qux"}


def test_missing_properties_file_loads_empty(builder):
    app = builder().with_home_directory().build()

    assert app.load_properties(Tier.HOME) == {}


def test_tiers_are_independent(builder):
    app = builder().with_home_directory().with_local_directory().build()

    app.save_home_properties({"only": "home"})

    assert app.load_local_properties() == {}


def test_save_overwrites_previous_contents(builder):
    app = builder().with_home_directory().build()
    app.save_home_properties({"a": "1", "b": "2"})

    app.save_home_properties({"c": "3"})

    assert app.load_home_properties() == {"c": "3"}


def test_saved_file_has_header_and_key_value_lines(builder):
    app = builder().with_home_directory().build()

    app.save_home_properties({"foo": "bar"})

    lines = app.home_properties_file.read_text(encoding="utf-8").splitlines()
    assert lines == ["#App properties", "foo=bar"]


def test_merged_properties_prefer_local(builder):
    app = builder().with_home_directory().with_local_directory().build()
    app.save_home_properties({"key": "home", "theme": "dark"})
    app.save_local_properties({"key": "local", "cache": "off"})

    merged = app.get_merged_properties()

    assert merged == {"key": "local", "theme": "dark", "cache": "off"}


def test_merged_properties_with_empty_tiers(builder):
    app = builder().with_home_directory().with_local_directory().build()

    assert app.get_merged_properties() == {}


def test_merged_properties_require_both_directories(builder):
    app = builder().with_home_directory().build()
    app.save_home_properties({"key": "home"})

    with pytest.raises(DirectoryMissing) as excinfo:
        app.get_merged_properties()
    assert excinfo.value.tier is Tier.LOCAL


def test_merged_properties_are_not_persisted(builder):
    app = builder().with_home_directory().with_local_directory().build()
    app.save_home_properties({"a": "home"})
    app.save_local_properties({"b": "local"})

    app.get_merged_properties()

    assert app.load_home_properties() == {"a": "home"}
    assert app.load_local_properties() == {"b": "local"}


def test_unreadable_properties_file(builder):
    app = builder().with_home_directory().build()
    app.home_properties_file.write_bytes(b"key=\xff\xfe\n")

    with pytest.raises(PropertyReadFailed) as excinfo:
        app.load_home_properties()
    assert excinfo.value.path == app.home_properties_file


def test_write_failure(builder):
    app = builder().with_local_directory().build()
    app.local_properties_file.mkdir()

    with pytest.raises(PropertyWriteFailed):
        app.save_local_properties({"a": "b"})


def test_unsafe_app_name_on_disk(builder, user_home, working_dir):
    app = builder("my/app:name?*|<>").with_home_directory().with_local_directory().build()

    app.save_home_properties({"foo": "bar"})
    app.save_local_properties({"foo": "bar"})

    safe = "my_app_name_____"
    assert (user_home / f".{safe}").is_dir()
    assert (working_dir / f".{safe}").is_dir()
    assert (user_home / f".{safe}" / f"{safe}.properties").is_file()
    assert (working_dir / f".{safe}" / f"{safe}.properties").is_file()
    assert [p.name for p in user_home.iterdir()] == [f".{safe}"]


def test_delete_app_removes_both_directories(builder):
    app = builder().with_home_directory().with_local_directory().build()
    app.save_home_properties({"a": "b"})
    (app.local_dir / "nested" / "deeper").mkdir(parents=True)
    (app.local_dir / "nested" / "deeper" / "file.txt").write_text("x")

    removed = app.delete_app()

    assert not app.home_dir.exists()
    assert not app.local_dir.exists()
    assert app.home_dir in removed
    assert app.local_dir in removed


def test_delete_app_without_directories_is_noop(builder):
    app = builder().build()

    assert app.delete_app() == []


def test_delete_app_keeps_base_directories(builder, user_home, working_dir):
    app = builder().with_home_directory().with_local_directory().build()

    app.delete_app()

    assert user_home.is_dir()
    assert working_dir.is_dir()


def test_paths_are_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    app = AppContext("x", "h", "l", "h/x.properties", "l/x.properties")

    assert app.home_dir == Path.cwd() / "h"
    assert app.local_properties_file == Path.cwd() / "l" / "x.properties"
    assert app.home_dir.is_absolute()


def test_context_is_read_only(builder):
    app = builder().build()

    with pytest.raises(AttributeError):
        app.home_dir = "/tmp"
    with pytest.raises(AttributeError):
        app.extra = 1


def test_delete_app_failure_in_home_stops_before_local(builder, monkeypatch):
    app = builder().with_home_directory().with_local_directory().build()
    app.save_home_properties({"a": "b"})
    (app.home_dir / "sub").mkdir()
    (app.home_dir / "sub" / "inner.txt").write_text("x")
    app.save_local_properties({"c": "d"})
    real_remove = cleanup._remove

    def failing_remove(entry, removed):
        if entry == app.home_dir:
            raise DeletionFailed(entry)
        real_remove(entry, removed)

    monkeypatch.setattr(cleanup, "_remove", failing_remove)

    with pytest.raises(DeletionFailed) as excinfo:
        app.delete_app()

    assert excinfo.value.path == app.home_dir
    assert app.home_dir.is_dir()
    assert list(app.home_dir.iterdir()) == []
    assert app.load_local_properties() == {"c": "d"}
