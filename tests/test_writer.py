# tests/test_writer.py
import builtins
import errno
from datetime import datetime

import pytest

from pitchprompt.core import writer as writer_module
from pitchprompt.core.writer import OutputWriter
from pitchprompt.errors import WriteError
from pitchprompt.models import RenderedPrompt

FIXED_TIME = datetime(2026, 1, 2, 3, 4, 5)


def _prompt(text="hello", template_id="proposal"):
    return RenderedPrompt(template_id=template_id, text=text)


def test_timestamped_name(tmp_path):
    writer = OutputWriter(tmp_path / "out", clock=lambda: FIXED_TIME)
    path = writer.write(_prompt())
    assert path == tmp_path / "out" / "proposal_20260102_030405.txt"
    assert path.read_text(encoding="utf-8") == "hello\n"


def test_same_template_twice_never_overwrites(tmp_path):
    writer = OutputWriter(tmp_path, clock=lambda: FIXED_TIME)
    first = writer.write(_prompt("first"))
    second = writer.write(_prompt("second"))

    assert first != second
    assert second.name == "proposal_20260102_030405_2.txt"
    assert first.read_text(encoding="utf-8") == "first\n"
    assert second.read_text(encoding="utf-8") == "second\n"


def test_untimestamped_names_are_numbered(tmp_path):
    writer = OutputWriter(tmp_path, timestamped=False)
    paths = [writer.write(_prompt(str(i), "docs")) for i in range(3)]
    assert [p.name for p in paths] == ["docs.txt", "docs_2.txt", "docs_3.txt"]


def test_existing_file_from_earlier_run_is_kept(tmp_path):
    (tmp_path / "docs.txt").write_text("old", encoding="utf-8")
    path = OutputWriter(tmp_path, timestamped=False).write(_prompt("new", "docs"))
    assert path.name == "docs_2.txt"
    assert (tmp_path / "docs.txt").read_text(encoding="utf-8") == "old"


def test_unusable_output_dir_raises_write_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(WriteError) as exc_info:
        OutputWriter(blocker / "prompts").write(_prompt())
    assert exc_info.value.exit_code == 3
    assert exc_info.value.reason


class _DiskFullFile:
    def __init__(self, f):
        self._f = f

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._f.close()
        return False

    def write(self, text):
        raise OSError(errno.ENOSPC, "No space left on device")


def test_failed_write_leaves_no_file(tmp_path, monkeypatch):
    real_open = builtins.open
    monkeypatch.setattr(
        writer_module, "open", lambda *args, **kwargs: _DiskFullFile(real_open(*args, **kwargs)), raising=False
    )

    with pytest.raises(WriteError, match="No space left on device"):
        OutputWriter(tmp_path, timestamped=False).write(_prompt())
    assert list(tmp_path.iterdir()) == []
