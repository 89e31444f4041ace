from .owners import router as owners_router


__all__ = ["owners_router"]
