# online_linear/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (variant, learning rate, ...).
    Should NOT print traceback.
    """


class ConfigError(UserInputError):
    """
    配置校验失败（setup 阶段一次性抛出，训练热路径不会再检查）
    """


class CapacityError(UserInputError):
    """
    feature_id 超出 ParameterStore 容量。
    只由 check_row() 这类冷路径校验抛出。
    """
