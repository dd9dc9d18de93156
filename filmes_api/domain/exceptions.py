from typing import Dict, List, Optional


class DomainError(Exception):
    pass


class NotFoundError(DomainError):
    pass


class ValidationError(DomainError):
    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        super().__init__(message or "One or more validation errors occurred.")
        self.errors = errors


class RepositoryError(DomainError):
    pass
