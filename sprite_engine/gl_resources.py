from __future__ import annotations

import logging
import OpenGL.GL as gl
from collections import defaultdict
from typing import Callable, DefaultDict, List

logger = logging.getLogger(__name__)

Deleter = Callable[[int], None]


def delete_texture(obj_id: int) -> None:
    gl.glDeleteTextures(1, [obj_id])


def delete_buffer(obj_id: int) -> None:
    gl.glDeleteBuffers(1, [obj_id])


def delete_program(obj_id: int) -> None:
    gl.glDeleteProgram(obj_id)


class GLResourceManager:
    """
    Owns the GL objects the presenter creates and frees them on shutdown.

    Usage:
        res = GLResourceManager()
        tex = res.texture()
        vbo = res.buffer()
        ...
        res.shutdown()
    """

    def __init__(self) -> None:
        self._objs: DefaultDict[Deleter, List[int]] = defaultdict(list)

    def adopt(self, obj_id: int, deleter: Deleter) -> int:
        """Track an object created elsewhere."""
        self._objs[deleter].append(obj_id)
        return obj_id

    def texture(self) -> int:
        return self.adopt(gl.glGenTextures(1), delete_texture)

    def buffer(self) -> int:
        return self.adopt(gl.glGenBuffers(1), delete_buffer)

    def count(self) -> int:
        return sum(len(ids) for ids in self._objs.values())

    def shutdown(self) -> None:
        """Free everything; needs the GL context that created the objects."""
        logger.debug("Freeing %d GL objects", self.count())
        for deleter, ids in self._objs.items():
            for obj_id in reversed(ids):
                deleter(int(obj_id))
        self._objs.clear()
