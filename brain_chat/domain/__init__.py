"""领域层模型与协议。

包含：
- intents: 用户意图的标签联合类型（Command / ThreadLookup / SemanticSearch）。
- models: Brain API 响应结构的类型化视图与解析函数。
- conversation: 对话记录、会话状态与快捷操作。
- exceptions: 业务异常类型定义。
"""
