from .core import Vec2

__all__ = ["Vec2"]
