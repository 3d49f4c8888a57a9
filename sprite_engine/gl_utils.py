"""
OpenGL helpers for presenting the canvas: shaders, 2D state, surface upload.
"""

from __future__ import annotations
import logging
import pygame
import OpenGL.GL as gl  # noqa: N811
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

QUAD_VERTEX_SHADER = """
#version 120
attribute vec2 aPos;
attribute vec2 aUV;
varying vec2 vUV;
void main() {
    gl_Position = vec4(aPos, 0.0, 1.0);
    vUV = aUV;
}
"""

QUAD_FRAGMENT_SHADER = """
#version 120
uniform sampler2D uCanvas;
varying vec2 vUV;
void main() {
    gl_FragColor = texture2D(uCanvas, vUV);
}
"""


def compile_shader(source: str, shader_type: int) -> int:
    """Compile one GLSL stage; raises RuntimeError with the driver log."""
    shader = gl.glCreateShader(shader_type)
    gl.glShaderSource(shader, source)
    gl.glCompileShader(shader)
    if not gl.glGetShaderiv(shader, gl.GL_COMPILE_STATUS):
        log = gl.glGetShaderInfoLog(shader).decode()
        logger.error("Shader compile failed: %s", log)
        raise RuntimeError(f"Shader compile error: {log}")
    return shader


def link_program(vs: int, fs: int) -> int:
    prog = gl.glCreateProgram()
    gl.glAttachShader(prog, vs)
    gl.glAttachShader(prog, fs)
    gl.glLinkProgram(prog)
    if not gl.glGetProgramiv(prog, gl.GL_LINK_STATUS):
        log = gl.glGetProgramInfoLog(prog).decode()
        logger.error("Program link failed: %s", log)
        raise RuntimeError(f"Shader link error: {log}")
    # Stages are no longer needed once linked into the program
    gl.glDeleteShader(vs)
    gl.glDeleteShader(fs)
    return prog


class ShaderProgram:
    """Vertex + fragment program with attribute/uniform lookups."""

    def __init__(
        self,
        vertex_source: Optional[str] = QUAD_VERTEX_SHADER,
        fragment_source: Optional[str] = QUAD_FRAGMENT_SHADER,
    ) -> None:
        if vertex_source is None or fragment_source is None:
            raise ValueError(
                "Vertex and fragment shader sources must be provided"
            )
        vs = compile_shader(vertex_source, gl.GL_VERTEX_SHADER)
        fs = compile_shader(fragment_source, gl.GL_FRAGMENT_SHADER)
        self.id = link_program(vs, fs)

    def use(self) -> None:
        gl.glUseProgram(self.id)

    def stop(self) -> None:
        gl.glUseProgram(0)

    def get_attrib(self, name: str) -> int:
        return gl.glGetAttribLocation(self.id, name)

    def get_uniform(self, name: str) -> int:
        return gl.glGetUniformLocation(self.id, name)


def setup_opengl(width: int, height: int) -> None:
    """
    Configure 2D OpenGL state: full-window viewport, alpha blending and no
    depth testing.
    """
    gl.glViewport(0, 0, width, height)
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)


def set_texture_filter(tex: int, nearest: bool) -> None:
    """Pick nearest sampling for pixel-art upscaling, linear otherwise."""
    mode = gl.GL_NEAREST if nearest else gl.GL_LINEAR
    gl.glBindTexture(gl.GL_TEXTURE_2D, tex)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, mode)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, mode)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
    gl.glBindTexture(gl.GL_TEXTURE_2D, 0)


def upload_surface(
    tex: int,
    surf: pygame.Surface,
    allocated: Optional[Tuple[int, int]] = None,
) -> Tuple[int, int]:
    """
    Copy ``surf`` into texture ``tex``. Storage is (re)allocated only when
    ``allocated`` differs from the surface size; returns the size now
    allocated.
    """
    data = pygame.image.tostring(surf, "RGBA", True)
    w, h = surf.get_size()
    gl.glBindTexture(gl.GL_TEXTURE_2D, tex)
    if allocated == (w, h):
        gl.glTexSubImage2D(
            gl.GL_TEXTURE_2D, 0, 0, 0, w, h, gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, data
        )
    else:
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            gl.GL_RGBA,
            w,
            h,
            0,
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
    gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
    return w, h
