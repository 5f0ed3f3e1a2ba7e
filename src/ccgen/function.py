"""C言語の関数を組み立てるクラス."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from .c_types import CType
from .errors import EmissionOrderError

logger = logging.getLogger(__name__)


def _join_args(args: Sequence[str]) -> str:
    return ", ".join(args)


class CFunction:
    """C言語の関数1つ分の情報と、生成済みのコードを保持するクラス.

    生成メソッドの呼び出し順序は検査しない。順序を誤った場合でも例外にはならず、
    そのまま不正なCコードが生成される。
    """

    def __init__(self, name: str, return_type: CType, parameters: Sequence[CType]) -> None:
        """関数を作成する.

        Args:
            name: 関数名
            return_type: 戻り値の型
            parameters: 引数のリスト（例: "int a"）
        """
        self._name = name
        self._return_type = return_type
        self._parameters: tuple[CType, ...] = tuple(parameters)
        self._body = ""

    @property
    def name(self) -> str:
        return self._name

    @property
    def return_type(self) -> CType:
        return self._return_type

    @property
    def parameters(self) -> tuple[CType, ...]:
        return self._parameters

    @property
    def body(self) -> str:
        return self._body

    def get_body(self) -> str:
        """生成済みのコードを返す."""
        return self._body

    def set_body(self, ccode: str) -> None:
        """生成済みのコードを置き換える."""
        self._body = ccode

    def append_body(self, ccode: str) -> None:
        """生成済みのコードの末尾に追加する."""
        self._body += ccode

    def signature(self) -> str:
        """宣言と定義で共通の関数シグネチャを返す."""
        return f"{self._return_type} {self._name}({_join_args(self._parameters)})"

    def create_function_declaration(self) -> None:
        """関数宣言を生成する（既存のコードは上書きされる）."""
        self.set_body(f"{self.signature()};")

    def create_function_start(self) -> None:
        """関数定義の先頭（開き括弧まで）を生成する（既存のコードは上書きされる）."""
        self.set_body(f"{self.signature()} {{\n")

    def create_function_call(self, function_name: str, args: Sequence[str] = ()) -> None:
        """関数本体に関数呼び出し文を1行追加する."""
        self.append_body(f"{function_name}({_join_args(args)});\n")

    def create_function_end(self) -> None:
        """関数定義の閉じ括弧を追加する."""
        self.append_body("}\n")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"return_type={self._return_type!r}, parameters={list(self._parameters)!r})"
        )


class FunctionState(Enum):
    """StrictCFunctionの生成状態."""

    EMPTY = "empty"
    DECLARED = "declared"
    OPENED = "opened"
    CLOSED = "closed"


class StrictCFunction(CFunction):
    """生成メソッドの呼び出し順序を検査するCFunction.

    出力の書式はCFunctionと同じ。許可されない順序で呼び出すと
    EmissionOrderErrorを送出し、生成済みのコードは変更しない。
    """

    def __init__(self, name: str, return_type: CType, parameters: Sequence[CType]) -> None:
        super().__init__(name, return_type, parameters)
        self._state = FunctionState.EMPTY

    @property
    def state(self) -> FunctionState:
        return self._state

    def _require_opened(self, operation: str) -> None:
        if self._state is not FunctionState.OPENED:
            logger.debug(
                "rejected %s() on %s in state %s", operation, self._name, self._state.value
            )
            raise EmissionOrderError(operation, self._state.value)

    def create_function_declaration(self) -> None:
        super().create_function_declaration()
        self._state = FunctionState.DECLARED

    def create_function_start(self) -> None:
        super().create_function_start()
        self._state = FunctionState.OPENED

    def create_function_call(self, function_name: str, args: Sequence[str] = ()) -> None:
        self._require_opened("create_function_call")
        super().create_function_call(function_name, args)

    def create_function_end(self) -> None:
        self._require_opened("create_function_end")
        super().create_function_end()
        self._state = FunctionState.CLOSED
