from cmdlog.repositories.log import LogRepository, SQLAlchemyLogRepository

__all__ = ["LogRepository", "SQLAlchemyLogRepository"]
