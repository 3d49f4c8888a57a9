import pygame
import pytest

import sprite_engine.gl_resources as gr
import sprite_engine.gl_utils as gu
import sprite_engine.presenter as pr
from sprite_engine.presenter import Presenter, compute_display_scale, letterbox


class FakeGL:
    """Stands in for OpenGL.GL: constants are their names, calls are recorded."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("GL_"):
            return name

        def record(*args):
            self.calls.append((name,) + args)
            return 1

        return record

    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_gl(monkeypatch):
    fake = FakeGL()
    for module in (pr, gu, gr):
        monkeypatch.setattr(module, "gl", fake)
    return fake


@pytest.mark.parametrize(
    "window,expected",
    [
        ((960, 540), 3.0),
        ((1000, 540), 3.0),
        # Landscape upscale is floored to whole pixels
        ((700, 540), 2.0),
        # Portrait windows keep the fractional scale
        ((400, 800), 1.25),
        # Downscaling is never floored
        ((160, 90), 0.5),
    ],
)
def test_compute_display_scale(window, expected):
    assert compute_display_scale(window[0], window[1], 320, 180) == expected


def test_letterbox_centres_canvas():
    assert letterbox(700, 540, 320, 180, 2.0) == (30.0, 90.0, 640.0, 360.0)
    assert letterbox(960, 540, 320, 180, 3.0) == (0.0, 0.0, 960.0, 540.0)


def test_presenter_resize_sets_scale_origin_and_filter(fake_gl):
    presenter = Presenter((700, 540), (320, 180))
    assert presenter.scale == 2.0
    assert presenter.origin == (30.0, 90.0)
    assert (
        "glTexParameteri",
        "GL_TEXTURE_2D",
        "GL_TEXTURE_MAG_FILTER",
        "GL_NEAREST",
    ) in fake_gl.calls
    fake_gl.calls.clear()
    assert presenter.resize(160, 90) == 0.5
    assert (
        "glTexParameteri",
        "GL_TEXTURE_2D",
        "GL_TEXTURE_MAG_FILTER",
        "GL_LINEAR",
    ) in fake_gl.calls


def test_present_uploads_and_draws_in_letterbox(fake_gl):
    presenter = Presenter((700, 540), (320, 180))
    fake_gl.calls.clear()
    surface = pygame.Surface((320, 180), pygame.SRCALPHA)
    presenter.present(surface)
    presenter.present(surface)
    names = fake_gl.names()
    # Storage allocated once, then updated in place
    assert names.count("glTexImage2D") == 1
    assert names.count("glTexSubImage2D") == 1
    assert names.count("glDrawArrays") == 2
    assert ("glViewport", 30, 90, 640, 360) in fake_gl.calls


def test_shutdown_frees_gl_objects(fake_gl):
    presenter = Presenter((960, 540), (320, 180))
    fake_gl.calls.clear()
    presenter.shutdown()
    names = fake_gl.names()
    assert "glDeleteProgram" in names
    assert "glDeleteTextures" in names
    assert "glDeleteBuffers" in names
