"""toggler ライブラリの例外型定義"""

from __future__ import annotations


class TogglerError(Exception):
    """toggler ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class TogglerErrorCodes:
    """TogglerError のエラーコード定数。"""

    UNREGISTERED_OPERATOR: str = "UNREGISTERED_OPERATOR"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class UnregisteredOperatorError(TogglerError):
    """組み込みでもカスタム登録済みでもない演算子が条件で参照された。"""

    def __init__(self, sign: object) -> None:
        super().__init__(
            code=TogglerErrorCodes.UNREGISTERED_OPERATOR,
            message=f'Operator "{sign}" is not registered',
        )
        self.sign = sign
