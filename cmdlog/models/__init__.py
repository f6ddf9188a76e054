from cmdlog.models.log import Log

__all__ = ["Log"]
