"""积分异常"""


class IntegrationError(Exception):
    """
    积分结果无效 (非有限值)。

    仅在 AdaptiveIntegrator(strict=True) 时抛出; 核心积分器始终以 NaN 返回。
    """

    def __init__(self, method: str, value, message: str | None = None):
        self.method = method
        self.value = value
        super().__init__(message or f"{method} integration returned non-finite value {value}")
