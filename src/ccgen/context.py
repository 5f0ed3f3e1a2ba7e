"""生成したC言語のコードを蓄積するモジュール."""

from __future__ import annotations

import logging
from typing import TextIO

from .function import CFunction

logger = logging.getLogger(__name__)


class Context:
    """生成したC言語のコードを追加順に連結して保持するクラス.

    Examples:
        >>> ctx = Context()
        >>> ctx.add_include("stdio.h")
        >>> ctx.get_ccode()
        '#include "stdio.h"\\n'
    """

    def __init__(self) -> None:
        self._ccode = ""

    @property
    def ccode(self) -> str:
        return self._ccode

    def get_ccode(self) -> str:
        """蓄積したコードを返す."""
        return self._ccode

    def add_ccode(self, ccode: str) -> None:
        """コードをそのまま末尾に追加する."""
        self._ccode += ccode

    def add_include(self, header: str) -> None:
        """#include行を追加する."""
        logger.debug("include %s", header)
        self.add_ccode(f'#include "{header}"\n')

    def add_function(self, func: CFunction) -> None:
        """関数の生成済みコードを追加する.

        閉じ括弧の補完などは行わず、呼び出し時点のコードをそのまま追加する。
        """
        logger.debug("add function %s", func.name)
        self.add_ccode(func.get_body())

    def print_ccode(self, file: TextIO | None = None) -> None:
        """蓄積したコードを出力する（既定は標準出力）."""
        print(self._ccode, file=file)
