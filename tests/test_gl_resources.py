import logging
import OpenGL.GL as gl
from sprite_engine.gl_resources import GLResourceManager, delete_texture


def test_manager_tracks_and_deletes(monkeypatch):
    mgr = GLResourceManager()
    next_id = iter(range(42, 100))
    deleted = []

    # Simulate object creation without a GL context
    monkeypatch.setattr(gl, "glGenTextures", lambda n: next(next_id))
    monkeypatch.setattr(gl, "glGenBuffers", lambda n: next(next_id))
    monkeypatch.setattr(
        gl, "glDeleteTextures", lambda n, ids: deleted.append(("tex", ids[0]))
    )
    monkeypatch.setattr(
        gl, "glDeleteBuffers", lambda n, ids: deleted.append(("buf", ids[0]))
    )

    tex1 = mgr.texture()
    tex2 = mgr.texture()
    vbo = mgr.buffer()
    assert (tex1, tex2, vbo) == (42, 43, 44)
    assert mgr.count() == 3
    assert mgr._objs[delete_texture] == [42, 43]

    mgr.shutdown()
    # Newest objects of each kind are freed first
    assert deleted == [("tex", 43), ("tex", 42), ("buf", 44)]
    assert mgr.count() == 0


def test_adopt_tracks_external_objects():
    mgr = GLResourceManager()
    freed = []
    assert mgr.adopt(7, freed.append) == 7
    mgr.shutdown()
    assert freed == [7]


def test_shutdown_logs_number_of_objects(caplog):
    mgr = GLResourceManager()
    mgr.adopt(1, lambda obj_id: None)
    mgr.adopt(2, lambda obj_id: None)
    with caplog.at_level(logging.DEBUG, logger="sprite_engine.gl_resources"):
        mgr.shutdown()
    assert "Freeing 2 GL objects" in caplog.text
