from .client import JobBoardAPIError, JobBoardClient

__all__ = ["JobBoardAPIError", "JobBoardClient"]
