"""
Presentation layer: shows the logical canvas in the window, scaled and
centred, through OpenGL. Drawing itself always happens in canvas pixels.
"""

from __future__ import annotations
import ctypes
import logging
import math
import numpy as np
import pygame
import OpenGL.GL as gl  # noqa: N811
from typing import Optional, Tuple

from .config import BACKGROUND_COLOR
from .gl_resources import GLResourceManager, delete_program
from .gl_utils import ShaderProgram, set_texture_filter, setup_opengl, upload_surface

logger = logging.getLogger(__name__)

# x, y, u, v per vertex, drawn as a triangle strip
_QUAD = np.array(
    [
        -1.0, -1.0, 0.0, 0.0,
        1.0, -1.0, 1.0, 0.0,
        -1.0, 1.0, 0.0, 1.0,
        1.0, 1.0, 1.0, 1.0,
    ],
    dtype=np.float32,
)
_STRIDE = 4 * _QUAD.itemsize


def compute_display_scale(
    window_width: int, window_height: int, canvas_width: int, canvas_height: int
) -> float:
    """
    Largest scale at which the canvas fits the window. When upscaling in a
    landscape window the scale is floored to a whole number so pixels stay
    square.
    """
    scale = min(window_height / canvas_height, window_width / canvas_width)
    if scale > 1 and window_height < window_width:
        scale = float(math.floor(scale))
    return scale


def letterbox(
    window_width: int,
    window_height: int,
    canvas_width: int,
    canvas_height: int,
    scale: float,
) -> Tuple[float, float, float, float]:
    """Return the (x, y, w, h) window rectangle of the centred canvas."""
    width = canvas_width * scale
    height = canvas_height * scale
    return (
        (window_width - width) / 2.0,
        (window_height - height) / 2.0,
        width,
        height,
    )


class Presenter:
    """Uploads the canvas surface to a texture and draws it as one quad."""

    def __init__(
        self,
        window_size: Tuple[int, int],
        canvas_size: Tuple[int, int],
    ) -> None:
        self._res = GLResourceManager()
        self.canvas_size = canvas_size
        self.window_size = window_size
        self.scale = 1.0
        self.viewport = (0.0, 0.0, float(canvas_size[0]), float(canvas_size[1]))
        self.shader = ShaderProgram()
        self._res.adopt(self.shader.id, delete_program)
        self.a_pos = self.shader.get_attrib("aPos")
        self.a_uv = self.shader.get_attrib("aUV")
        self.u_canvas = self.shader.get_uniform("uCanvas")
        self.canvas_tex = self._res.texture()
        self._allocated: Optional[Tuple[int, int]] = None
        self.quad_vbo = self._res.buffer()
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.quad_vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, _QUAD.nbytes, _QUAD, gl.GL_STATIC_DRAW)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        self.resize(*window_size)

    @property
    def origin(self) -> Tuple[float, float]:
        """Window position of the canvas's top left corner."""
        return self.viewport[0], self.viewport[1]

    def resize(self, window_width: int, window_height: int) -> float:
        """Recompute scale and letterbox for a new window size."""
        self.window_size = (window_width, window_height)
        canvas_width, canvas_height = self.canvas_size
        self.scale = compute_display_scale(
            window_width, window_height, canvas_width, canvas_height
        )
        self.viewport = letterbox(
            window_width, window_height, canvas_width, canvas_height, self.scale
        )
        setup_opengl(window_width, window_height)
        set_texture_filter(self.canvas_tex, nearest=self.scale > 1)
        logger.debug(
            "Presenter resized to %dx%d, scale %s, viewport %s",
            window_width,
            window_height,
            self.scale,
            self.viewport,
        )
        return self.scale

    def present(self, surface: pygame.Surface) -> None:
        """Draw ``surface`` into the letterboxed viewport."""
        self._allocated = upload_surface(self.canvas_tex, surface, self._allocated)
        window_width, window_height = self.window_size
        gl.glViewport(0, 0, window_width, window_height)
        gl.glClearColor(*BACKGROUND_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        x, y, width, height = self.viewport
        # GL viewports count rows from the bottom of the window
        gl.glViewport(
            int(x), int(window_height - y - height), int(width), int(height)
        )
        self.shader.use()
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.canvas_tex)
        gl.glUniform1i(self.u_canvas, 0)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.quad_vbo)
        gl.glEnableVertexAttribArray(self.a_pos)
        gl.glVertexAttribPointer(
            self.a_pos, 2, gl.GL_FLOAT, gl.GL_FALSE, _STRIDE, ctypes.c_void_p(0)
        )
        gl.glEnableVertexAttribArray(self.a_uv)
        gl.glVertexAttribPointer(
            self.a_uv,
            2,
            gl.GL_FLOAT,
            gl.GL_FALSE,
            _STRIDE,
            ctypes.c_void_p(2 * _QUAD.itemsize),
        )
        gl.glDrawArrays(gl.GL_TRIANGLE_STRIP, 0, 4)
        gl.glDisableVertexAttribArray(self.a_pos)
        gl.glDisableVertexAttribArray(self.a_uv)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
        self.shader.stop()

    def shutdown(self) -> None:
        self._res.shutdown()
