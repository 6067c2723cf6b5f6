"""统一业务异常模型。

所有跨模块抛出的业务级错误都应该继承自 BusinessError，
便于在会话状态机或 UI 层做统一捕获与用户提示。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "NETWORK_ERROR"）。
        message: 用户可读错误信息。
        http_status: 映射到 HTTP 时可用的状态码，默认 400。
        extra: 其他补充字段（例如 endpoint、intent 等）。
    """

    def __init__(self, code: str, message: str, http_status: int = 400, **extra):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)


class TransportError(BusinessError):
    """一次 Brain API 调用失败：网络错误、非 2xx 状态或响应体无法解析为 JSON。"""


class NetworkError(TransportError):
    """网络层错误，例如连接失败、超时等。"""


class ApiError(TransportError):
    """Brain API 返回非 2xx（429 除外）时抛出。"""


class RateLimitError(TransportError):
    """Brain API 限流（429）。本层不做重试。"""


class ResponseDecodeError(TransportError):
    """响应体不是合法 JSON。"""


class MalformedResponseError(BusinessError):
    """响应 JSON 中已识别的字段类型不对（如 results 不是数组）。

    由 normalizer 兜底为 "No results found."，不视为致命错误。
    """


class ClassificationError(BusinessError):
    """输入无法分类（仅在传入非字符串时出现，分类本身是全函数）。"""


class ConfigError(BusinessError):
    """配置缺失或无效。"""
