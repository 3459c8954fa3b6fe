import pytest

from hexhog.core import ByteBuffer, Delete, Edit, EditSession, Insert, SaveError


def make_session(data: bytes = b"", **kwargs) -> EditSession:
    return EditSession(ByteBuffer(data), **kwargs)


def test_apply_then_undo_restores_buffer() -> None:
    session = make_session(b"\x00\x01\x02\x03")
    changes = [
        Edit(1, b"\x01", b"\xFF"),
        Insert(4, b"\xAA\xBB"),
        Delete(0, b"\x00\xFF"),
        Insert(0, b"\x10"),
    ]

    for change in changes:
        session.apply(change)
    for _ in changes:
        session.undo()

    assert session.buffer.to_bytes() == b"\x00\x01\x02\x03"
    assert len(session.buffer) == 4


def test_undo_then_redo_is_identity() -> None:
    session = make_session(b"ABC")
    session.apply(Delete(1, b"B"))
    before = session.buffer.to_bytes()

    session.undo()
    session.redo()

    assert session.buffer.to_bytes() == before


def test_new_edit_after_undo_discards_redo() -> None:
    session = make_session(b"ABC")
    session.apply(Insert(3, b"D"))
    session.undo()

    session.apply(Edit(0, b"A", b"Z"))

    assert session.redo() is False
    assert session.buffer.to_bytes() == b"ZBC"


def test_redo_then_new_edit_clears_remaining_redo() -> None:
    session = make_session(b"")
    session.apply(Insert(0, b"A"))
    session.apply(Insert(1, b"B"))
    session.undo()
    session.undo()

    assert session.redo()
    session.apply(Insert(0, b"X"))

    assert session.redo() is False
    assert session.buffer.to_bytes() == b"XA"


def test_undo_redo_on_empty_history() -> None:
    session = make_session(b"AB")

    assert session.undo() is False
    assert session.redo() is False
    assert session.buffer.to_bytes() == b"AB"
    assert not session.modified


def test_yank_paste_at_append_slot() -> None:
    session = make_session(b"\x41\x42\x43")
    session.cursor.set_idx(0)
    session.cursor.start_selection()
    session.cursor.move_right()

    assert session.selection_bytes() == b"\x41\x42"

    session.yank()
    assert not session.cursor.selecting

    session.cursor.set_idx(3)
    session.paste()

    assert session.buffer.to_bytes() == b"\x41\x42\x43\x41\x42"
    assert list(session.history.undone) == [Insert(3, b"\x41\x42")]
    assert session.selection_range() == (3, 4)

    session.undo()

    assert session.buffer.to_bytes() == b"\x41\x42\x43"
    assert session.cursor.idx == 3


def test_paste_with_empty_clipboard_does_nothing() -> None:
    session = make_session(b"AB")

    assert session.paste() is False
    assert len(session.history) == 0


def test_clipboard_get_set() -> None:
    session = make_session(b"AB")

    session.set_clipboard(bytearray(b"\x01\x02"))

    assert session.get_clipboard() == b"\x01\x02"


def test_insert_into_empty_buffer_undo_redo() -> None:
    session = make_session(b"")

    session.insert_byte(0xFF)
    assert session.buffer.to_bytes() == b"\xFF"

    session.undo()
    assert session.buffer.to_bytes() == b""

    session.redo()
    assert session.buffer.to_bytes() == b"\xFF"


def test_append_is_not_tracked_by_default() -> None:
    session = make_session(b"\x00")

    session.cursor.set_idx(0)
    session.overwrite_byte(0x10)
    session.cursor.set_idx(1)
    session.overwrite_byte(0x20)

    assert session.buffer.to_bytes() == b"\x10\x20"
    assert len(session.history) == 1

    session.undo()

    assert session.buffer.to_bytes() == b"\x00\x20"
    assert session.modified


def test_append_tracked_when_enabled() -> None:
    session = make_session(b"\x00", track_appends=True)
    session.cursor.set_idx(1)

    session.overwrite_byte(0x20)
    session.undo()

    assert session.buffer.to_bytes() == b"\x00"


def test_overwrite_records_edit() -> None:
    session = make_session(b"\x00\x01")
    session.cursor.set_idx(1)

    session.overwrite_byte(0x7F)

    assert list(session.history.undone) == [Edit(1, b"\x01", b"\x7F")]


def test_delete_selection_uses_lower_bound() -> None:
    session = make_session(b"ABCDEF")
    session.cursor.set_idx(4)
    session.cursor.start_selection()
    session.cursor.set_idx(1)

    assert session.delete_selection()

    assert session.buffer.to_bytes() == b"AF"
    assert list(session.history.undone) == [Delete(1, b"BCDE")]
    assert session.cursor.idx == 1
    assert not session.cursor.selecting


def test_delete_clamps_cursor_to_last_byte() -> None:
    session = make_session(b"ABC")
    session.cursor.set_idx(2)

    session.delete_selection()

    assert session.buffer.to_bytes() == b"AB"
    assert session.cursor.idx == 1


def test_delete_selection_reaching_past_end() -> None:
    session = make_session(b"ABC")
    session.cursor.set_idx(1)
    session.cursor.start_selection()
    session.cursor.set_idx(3)

    session.delete_selection()

    assert session.buffer.to_bytes() == b"A"
    assert session.cursor.idx == 0


def test_delete_at_append_slot_moves_left() -> None:
    session = make_session(b"AB")
    session.cursor.set_idx(2)

    assert session.delete_selection() is False

    assert session.buffer.to_bytes() == b"AB"
    assert session.cursor.idx == 1
    assert len(session.history) == 0


def test_delete_on_empty_buffer() -> None:
    session = make_session(b"")

    assert session.delete_selection() is False
    assert session.cursor.idx == 0


def test_feed_nibble_overwrites_and_moves_right() -> None:
    session = make_session(b"\x00\x00")
    session.begin_edit()

    assert session.feed_nibble("4") is None
    assert session.editing
    assert session.feed_nibble("1") == 0x41

    assert session.buffer.to_bytes() == b"\x41\x00"
    assert session.cursor.idx == 1
    assert not session.editing


def test_feed_nibble_insert_mode() -> None:
    session = make_session(b"\x00")
    session.begin_edit(inserting=True)

    session.feed_nibble("f")
    session.feed_nibble("f")

    assert session.buffer.to_bytes() == b"\xFF\x00"
    assert list(session.history.undone) == [Insert(0, b"\xFF")]


def test_cancel_edit_emits_nothing() -> None:
    session = make_session(b"\x00")
    session.begin_edit()
    session.feed_nibble("a")

    session.cancel_edit()

    assert session.buffer.to_bytes() == b"\x00"
    assert len(session.history) == 0
    assert session.nibbles.is_empty


def test_undo_clears_selection_and_clamps_cursor() -> None:
    session = make_session(b"AB")
    session.cursor.set_idx(2)
    session.apply(Insert(2, b"CD"))
    session.cursor.set_idx(4)
    session.cursor.start_selection()

    session.undo()

    assert session.cursor.idx == 2
    assert not session.cursor.selecting


def test_save_and_load_round_trip(tmp_path) -> None:
    path = tmp_path / "data.bin"
    session = make_session(b"\x01\x02", filename=str(path))
    session.insert_byte(0x00)

    assert session.save() == str(path)
    assert not session.modified
    assert path.read_bytes() == b"\x00\x01\x02"

    reloaded = EditSession.load(str(path))
    assert reloaded.buffer.to_bytes() == b"\x00\x01\x02"


def test_load_missing_file_gives_empty_session(tmp_path) -> None:
    session = EditSession.load(str(tmp_path / "new.bin"))

    assert len(session.buffer) == 0
    assert session.filename == str(tmp_path / "new.bin")


def test_save_failure_leaves_state_untouched(tmp_path) -> None:
    target = tmp_path / "missing_dir" / "data.bin"
    session = make_session(b"AB", filename=str(target))
    session.insert_byte(0x00)

    with pytest.raises(SaveError) as excinfo:
        session.save()

    assert excinfo.value.path == str(target)
    assert isinstance(excinfo.value, OSError)
    assert session.modified
    assert session.buffer.to_bytes() == b"\x00AB"
    assert len(session.history) == 1


def test_save_without_filename() -> None:
    session = make_session(b"AB")

    with pytest.raises(ValueError):
        session.save()
