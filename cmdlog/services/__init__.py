from cmdlog.services.log import LogService

__all__ = ["LogService"]
