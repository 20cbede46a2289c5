"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class SealedTypeError(DomainError, TypeError):
    """Raised when a class tries to extend a sealed type."""

    def __init__(self, sealed: type, subclass_name: str):
        self.sealed = sealed
        super().__init__(
            f"{sealed.__name__} is sealed and cannot be subclassed by {subclass_name}"
        )


class CurrencyMismatchError(BusinessRuleViolationError):
    """Raised when money in different currencies is combined."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Cannot combine {expected} with {actual}")


class InsufficientFundsError(BusinessRuleViolationError):
    """Raised when a withdrawal would overdraw an account."""

    def __init__(self, account_id: str, balance: str, requested: str):
        super().__init__(
            f"Account {account_id} has {balance}, cannot withdraw {requested}"
        )


class MutabilityViolationError(DomainError):
    """Raised when a value that must be immutable is not."""

    def __init__(self, subject: str, findings: list[str]):
        self.subject = subject
        self.findings = findings
        super().__init__(f"{subject} is not immutable: {', '.join(findings)}")

