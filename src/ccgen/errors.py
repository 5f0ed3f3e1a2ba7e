from __future__ import annotations


class EmissionOrderError(ValueError):
    """関数本体の生成順序が不正な場合の例外."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(f"{operation}() is not allowed in state '{state}'")
        self.operation = operation
        self.state = state
