"""HTTP routers."""

from .wordcount import router

__all__ = ["router"]
